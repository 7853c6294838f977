from __future__ import annotations
import logging
import math
from datetime import datetime
from typing import Callable, Optional

from studyboard.telegram_notifier import TelegramNotifier

SessionCallback = Callable[[str, int], object]


class SessionTimer:
    """Stopwatch for a single study session with an optional minute goal.

    Stopping the timer hands ``(subject, minutes)`` to ``on_complete`` once.
    """

    def __init__(self, on_complete: SessionCallback,
                 notifier: Optional[TelegramNotifier] = None,
                 now: Callable[[], datetime] = datetime.now) -> None:
        self.on_complete = on_complete
        self.notifier = notifier
        self._now = now
        self.subject = ""
        self.goal: Optional[int] = None
        self.is_active = False
        self.is_paused = False
        self.goal_reached = False
        self._elapsed = 0.0
        self._resumed_at: datetime | None = None

    # session management -------------------------------------------------
    def start(self, subject: str, goal: Optional[int] = None) -> None:
        self.subject = subject
        self.goal = goal
        self.is_active = True
        self.is_paused = False
        self.goal_reached = False
        self._elapsed = 0.0
        self._resumed_at = self._now()

    def pause(self) -> None:
        if not self.is_active or self.is_paused:
            return
        self._elapsed += self._running_seconds()
        self._resumed_at = None
        self.is_paused = True

    def resume(self) -> None:
        if not self.is_active or not self.is_paused:
            return
        self._resumed_at = self._now()
        self.is_paused = False

    def toggle_pause(self) -> None:
        if self.is_paused:
            self.resume()
        else:
            self.pause()

    def stop(self) -> int:
        """End the session and return the minutes logged (0 if nothing was)."""
        if not self.is_active:
            return 0
        seconds = self.elapsed_seconds()
        self.is_active = False
        self.is_paused = False
        self._resumed_at = None
        minutes = max(1, math.floor(seconds / 60 + 0.5)) if seconds > 0 else 0
        if minutes > 0 and self.subject.strip():
            self.on_complete(self.subject, minutes)
            return minutes
        logging.info("Sessione vuota o senza materia, niente da registrare.")
        return 0

    def reset(self) -> None:
        self.is_active = False
        self.is_paused = False
        self.goal_reached = False
        self._elapsed = 0.0
        self._resumed_at = None

    # progress -----------------------------------------------------------
    def elapsed_seconds(self) -> float:
        return self._elapsed + self._running_seconds()

    def elapsed_minutes(self) -> int:
        return int(self.elapsed_seconds() // 60)

    def check_goal(self) -> bool:
        """Return True exactly once, the first time the goal is crossed."""
        if not self.goal or not self.is_active or self.goal_reached:
            return False
        if self.elapsed_minutes() < self.goal:
            return False
        self.goal_reached = True
        logging.info(f"Obiettivo raggiunto: {self.goal} minuti di {self.subject}")
        if self.notifier:
            self.notifier.send_message(
                f"🎉 Obiettivo raggiunto: {self.goal} minuti di {self.subject}!"
            )
        return True

    def _running_seconds(self) -> float:
        if self._resumed_at is None:
            return 0.0
        return (self._now() - self._resumed_at).total_seconds()
