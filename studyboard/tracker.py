from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional

from studyboard.levels import Level, format_minutes, level_for
from studyboard.ranking import rank
from studyboard.subjects import SubjectTotal, find_subject, merge, reset, summarize, validate_session
from studyboard.telegram_notifier import TelegramNotifier

Listener = Callable[[List[SubjectTotal]], None]


class StudyTracker:
    """Accumulate study minutes per subject and keep the leaderboard current."""

    def __init__(self, notifier: Optional[TelegramNotifier] = None) -> None:
        self.notifier = notifier
        self.subjects: List[SubjectTotal] = []
        self.leaderboard: List[SubjectTotal] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the new leaderboard after every change."""
        self._listeners.append(listener)

    # mutations ----------------------------------------------------------
    def log_session(self, subject: str, minutes: int) -> SubjectTotal:
        """Add a finished or manually entered session.

        Raises InvalidSession for a blank subject or a non-positive duration.
        """
        validate_session(subject, minutes)
        subject = subject.strip()
        merge(self.subjects, subject, minutes)
        self._refresh()
        entry = self.subjects[find_subject(self.subjects, subject)]
        logging.info(f"Sessione registrata: {subject} +{minutes}m (totale {entry.total_minutes}m)")
        self._notify(f"✅ Registrati {format_minutes(minutes)} per {subject}")
        return entry

    def reset(self) -> None:
        reset(self.subjects)
        self._refresh()
        logging.info("Tutti i dati di studio sono stati cancellati.")
        self._notify("🗑️ Tutti i dati cancellati")

    # summaries ----------------------------------------------------------
    def total_minutes(self) -> int:
        return sum(s.total_minutes for s in self.subjects)

    def level(self) -> Level:
        return level_for(self.total_minutes())

    def summary(self) -> Dict[str, int]:
        return summarize(self.subjects)

    def top_subject(self) -> Optional[SubjectTotal]:
        return self.leaderboard[0] if self.leaderboard else None

    # internals ----------------------------------------------------------
    def _refresh(self) -> None:
        # readers only ever see a fully built list
        self.leaderboard = rank(self.subjects)
        for listener in self._listeners:
            listener(self.leaderboard)

    def _notify(self, text: str) -> None:
        if self.notifier:
            self.notifier.send_message(text)
