from __future__ import annotations
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from pytz import timezone

from studyboard.charts import render_subject_chart
from studyboard.config import Settings
from studyboard.levels import format_leaderboard, format_minutes
from studyboard.telegram_notifier import TelegramNotifier
from studyboard.tracker import StudyTracker


class StudyScheduler:
    """Schedule the daily leaderboard report and the midday check."""

    def __init__(self, tracker: StudyTracker, notifier: TelegramNotifier,
                 settings: Settings) -> None:
        self.tracker = tracker
        self.notifier = notifier
        self.settings = settings
        self.tz = timezone(settings.timezone)
        self.scheduler = BackgroundScheduler(timezone=self.tz)
        self._schedule_jobs()

    def _schedule_jobs(self) -> None:
        self.scheduler.add_job(self.daily_report, "cron", hour=self.settings.report_hour, minute=0)
        self.scheduler.add_job(self.midday_check, "cron", hour=12, minute=0)

    def start(self) -> None:
        self.scheduler.start()

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown()

    def daily_report(self) -> None:
        ranked = self.tracker.leaderboard
        self.notifier.send_message(format_leaderboard(ranked))
        chart = render_subject_chart(ranked, self.settings.report_dir)
        if chart:
            total = format_minutes(self.tracker.total_minutes())
            self.notifier.send_photo(chart, caption=f"📊 Totale: {total}")

    def midday_check(self) -> None:
        total = self.tracker.total_minutes()
        if total > 0:
            text = f"⏰ È già passata metà giornata e hai studiato {format_minutes(total)}."
        else:
            text = "⏰ È già passata metà giornata e non hai ancora studiato! 😱"
        logging.info(f"Controllo di metà giornata: {total} minuti")
        self.notifier.send_message(text)
