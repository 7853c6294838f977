from __future__ import annotations
import asyncio
import logging
import os
import threading
from pathlib import Path
from typing import List, Optional

from telegram import Bot


class TelegramNotifier:
    """Send messages and charts via Telegram bot if configured.

    Messages go to the configured chat and to every chat registered with
    :meth:`register_chat`. Sends are serialized because the Tk thread and the
    scheduler thread share one bot.
    """

    def __init__(self, token: Optional[str] = None, chat_id: Optional[str] = None) -> None:
        self.token = token or os.environ.get("TELEGRAM_BOT_TOKEN")
        self.chat_id = chat_id or os.environ.get("TELEGRAM_CHAT_ID")
        self.bot = Bot(self.token) if self.token else None
        self._chat_ids: List[str] = [str(self.chat_id)] if self.chat_id else []
        self._chats_lock = threading.Lock()
        self._send_lock = threading.Lock()

    @property
    def chat_ids(self) -> List[str]:
        with self._chats_lock:
            return list(self._chat_ids)

    @property
    def enabled(self) -> bool:
        return self.bot is not None and bool(self._chat_ids)

    def register_chat(self, chat_id: int | str) -> bool:
        """Add a chat to the recipients; False if it was already there."""
        cid = str(chat_id)
        with self._chats_lock:
            if cid in self._chat_ids:
                return False
            self._chat_ids.append(cid)
        logging.info(f"Chat {cid} registrata per le notifiche.")
        return True

    def send_message(self, text: str) -> None:
        if not self.enabled:
            # Log instead when Telegram isn't configured
            logging.info(f"Telegram disabilitato: {text}")
            return
        with self._send_lock:
            try:
                asyncio.run(self._send_message(text))
            except Exception as exc:
                logging.error(f"Errore inviando messaggio Telegram: {exc}")

    def send_photo(self, path: str | Path, caption: str = "") -> None:
        if not self.enabled:
            logging.info(f"Telegram disabilitato, grafico in {path}")
            return
        with self._send_lock:
            try:
                asyncio.run(self._send_photo(Path(path), caption))
            except Exception as exc:
                logging.error(f"Errore inviando grafico {path}: {exc}")

    async def _send_message(self, text: str) -> None:
        async with self.bot:
            for cid in self.chat_ids:
                try:
                    await self.bot.send_message(chat_id=cid, text=text)
                except Exception as exc:
                    logging.error(f"Errore inviando messaggio a {cid}: {exc}")

    async def _send_photo(self, path: Path, caption: str) -> None:
        async with self.bot:
            for cid in self.chat_ids:
                with path.open("rb") as img:
                    try:
                        await self.bot.send_photo(chat_id=cid, photo=img, caption=caption)
                    except Exception as exc:
                        logging.error(f"Errore inviando grafico a {cid}: {exc}")
