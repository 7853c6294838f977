"""Shared test fixtures for studyboard tests."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from studyboard.subjects import SubjectTotal
from studyboard.telegram_notifier import TelegramNotifier
from studyboard.tracker import StudyTracker


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_bot() -> MagicMock:
    """Stand-in for telegram.Bot with awaitable send methods."""
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.send_photo = AsyncMock()
    return bot


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Notifier mock recording every message instead of calling Telegram."""
    return MagicMock(spec=TelegramNotifier)


@pytest.fixture
def tracker(mock_notifier: MagicMock) -> StudyTracker:
    return StudyTracker(mock_notifier)


@pytest.fixture
def sample_subjects() -> list[SubjectTotal]:
    return [
        SubjectTotal("Math", 30),
        SubjectTotal("Physics", 90),
        SubjectTotal("History", 15),
        SubjectTotal("Chemistry", 90),
        SubjectTotal("Art", 45),
        SubjectTotal("Biology", 5),
        SubjectTotal("Latin", 60),
    ]
