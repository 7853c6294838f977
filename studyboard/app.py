from studyboard.config import Settings, configure_logging
from studyboard.gui import StudyGUI
from studyboard.scheduler import StudyScheduler
from studyboard.telegram_notifier import TelegramNotifier
from studyboard.tracker import StudyTracker


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    notifier = TelegramNotifier(settings.telegram_token, settings.telegram_chat_id)
    tracker = StudyTracker(notifier)
    scheduler = StudyScheduler(tracker, notifier, settings)
    scheduler.start()
    app = StudyGUI(tracker, notifier, settings)
    try:
        app.run()
    finally:
        scheduler.shutdown()


if __name__ == "__main__":
    main()
