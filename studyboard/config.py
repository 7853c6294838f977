from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
TOKEN_FILE = "token.txt"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""

    telegram_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    timezone: str = "Europe/Rome"
    report_dir: str = "report_classifica"
    report_hour: int = 22
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None,
                 token_file: str | Path = TOKEN_FILE) -> "Settings":
        env = os.environ if env is None else env
        token = env.get("TELEGRAM_BOT_TOKEN") or _read_token(Path(token_file))
        return cls(
            telegram_token=token,
            telegram_chat_id=env.get("TELEGRAM_CHAT_ID") or None,
            gemini_api_key=env.get("GEMINI_API_KEY") or env.get("API_KEY") or None,
            gemini_model=env.get("GEMINI_MODEL", cls.gemini_model),
            timezone=env.get("STUDYBOARD_TIMEZONE", cls.timezone),
            report_dir=env.get("STUDYBOARD_REPORT_DIR", cls.report_dir),
            report_hour=_int_setting(env, "STUDYBOARD_REPORT_HOUR", cls.report_hour),
            log_level=env.get("STUDYBOARD_LOG_LEVEL", cls.log_level).upper(),
        )


def _read_token(path: Path) -> Optional[str]:
    if not path.exists():
        return None
    token = path.read_text(encoding="utf-8").strip()
    if token:
        logging.info(f"Token caricato da {path}.")
    return token or None


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"{key}={raw!r} non è un intero, uso {default}.")
        return default


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
