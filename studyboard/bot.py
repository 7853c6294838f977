from __future__ import annotations
import asyncio
import logging

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import Application, CallbackQueryHandler, CommandHandler, ContextTypes

from studyboard.advisor import get_study_insight
from studyboard.charts import render_subject_chart
from studyboard.config import Settings, configure_logging
from studyboard.levels import format_leaderboard, format_minutes
from studyboard.scheduler import StudyScheduler
from studyboard.subjects import InvalidSession
from studyboard.telegram_notifier import TelegramNotifier
from studyboard.tracker import StudyTracker

USAGE_AGGIUNGI = "Uso: /aggiungi <materia> <minuti> — es. /aggiungi Algebra 20"


def _tracker(context: ContextTypes.DEFAULT_TYPE) -> StudyTracker:
    return context.bot_data["tracker"]


def _settings(context: ContextTypes.DEFAULT_TYPE) -> Settings:
    return context.bot_data["settings"]


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/start: registra la chat e conferma."""
    cid = update.effective_chat.id
    notifier = context.bot_data.get("notifier")
    if notifier is not None:
        notifier.register_chat(cid)
    logging.info(f"Nuovo chat_id: {cid}")
    await update.message.reply_text("Bot attivo. Registra le sessioni con /aggiungi.")


async def aggiungi(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/aggiungi <materia> <minuti>"""
    args = context.args or []
    if len(args) < 2:
        await update.message.reply_text(USAGE_AGGIUNGI)
        return
    subject = " ".join(args[:-1])
    try:
        minutes = int(args[-1])
        entry = _tracker(context).log_session(subject, minutes)
    except (InvalidSession, ValueError) as exc:
        logging.info(f"Sessione rifiutata: {exc}")
        await update.message.reply_text(USAGE_AGGIUNGI)
        return
    await update.message.reply_text(
        f"👍 Aggiunti {format_minutes(minutes)} di {entry.name} "
        f"(totale {format_minutes(entry.total_minutes)})."
    )


async def classifica(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(format_leaderboard(_tracker(context).leaderboard))


async def totale(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    tracker = _tracker(context)
    total = tracker.total_minutes()
    if total == 0:
        await update.message.reply_text("Non hai ancora studiato nulla. 🥲")
        return
    level = tracker.level()
    await update.message.reply_text(
        f"Hai studiato {format_minutes(total)} in tutto. 📚\n"
        f"Livello: {level.title} ({level.percent:.0f}%)"
    )


async def consiglio(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    settings = _settings(context)
    advice = await asyncio.to_thread(
        get_study_insight, _tracker(context).summary(),
        settings.gemini_api_key, settings.gemini_model,
    )
    await update.message.reply_text(f"💡 {advice}")


async def grafico(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    tracker = _tracker(context)
    chart = render_subject_chart(tracker.leaderboard, _settings(context).report_dir)
    if not chart:
        await update.message.reply_text("Nessun dato da mostrare ancora.")
        return
    with open(chart, "rb") as img:
        await update.message.reply_photo(
            photo=img, caption=f"📊 Totale: {format_minutes(tracker.total_minutes())}"
        )


async def reset(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    kb = [[
        InlineKeyboardButton("Sì", callback_data="reset_si"),
        InlineKeyboardButton("No", callback_data="reset_no"),
    ]]
    await update.message.reply_text(
        "Confermi di cancellare tutti i dati?",
        reply_markup=InlineKeyboardMarkup(kb),
    )


async def risposta_reset(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    q = update.callback_query
    await q.answer()
    if q.data == "reset_si":
        _tracker(context).reset()
        await q.edit_message_text("🗑️ Tutti i dati cancellati.")
    else:
        await q.edit_message_text("❌ Operazione annullata.")


def build_application(settings: Settings, tracker: StudyTracker,
                      notifier: TelegramNotifier | None = None) -> Application:
    app = Application.builder().token(settings.telegram_token).build()
    app.bot_data["tracker"] = tracker
    app.bot_data["settings"] = settings
    app.bot_data["notifier"] = notifier

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("aggiungi", aggiungi))
    app.add_handler(CommandHandler("classifica", classifica))
    app.add_handler(CommandHandler("totale", totale))
    app.add_handler(CommandHandler("consiglio", consiglio))
    app.add_handler(CommandHandler("grafico", grafico))
    app.add_handler(CommandHandler("reset", reset))
    app.add_handler(CallbackQueryHandler(risposta_reset, pattern="^reset_"))
    return app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    if not settings.telegram_token:
        raise SystemExit("TELEGRAM_BOT_TOKEN mancante (o token.txt vuoto).")

    # replies go through the handlers, so the tracker gets no notifier here
    tracker = StudyTracker()
    notifier = TelegramNotifier(settings.telegram_token, settings.telegram_chat_id)
    scheduler = StudyScheduler(tracker, notifier, settings)
    scheduler.start()
    try:
        build_application(settings, tracker, notifier).run_polling()
    finally:
        scheduler.shutdown()


if __name__ == "__main__":
    main()
