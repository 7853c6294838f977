"""Tests for the Tkinter front end, with tkinter itself mocked out."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("tkinter")

from studyboard.config import Settings  # noqa: E402
from studyboard.gui import StudyGUI  # noqa: E402
from studyboard.tracker import StudyTracker  # noqa: E402


@pytest.fixture
def gui(tracker: StudyTracker, mock_notifier: MagicMock) -> Generator[StudyGUI, None, None]:
    """StudyGUI built on mock widgets; every variable and button is distinct."""
    with patch("studyboard.gui.tk") as tk_mock, patch("studyboard.gui.ttk"):
        tk_mock.StringVar.side_effect = lambda *a, **kw: MagicMock()
        tk_mock.Button.side_effect = lambda *a, **kw: MagicMock()
        yield StudyGUI(tracker, mock_notifier, Settings(gemini_api_key="key"))


class TestInsight:
    def test_button_disabled_until_first_session(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        gui.insight_button.config.assert_called_with(state="disabled")

        tracker.log_session("Math", 10)

        gui.insight_button.config.assert_called_with(state="normal")

    def test_no_advice_request_without_subjects(self, gui: StudyGUI) -> None:
        with patch("studyboard.gui.get_study_insight") as insight:
            gui.show_insight()

        insight.assert_not_called()
        gui.insight_var.set.assert_not_called()

    def test_advice_for_current_totals(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        tracker.log_session("Math", 10)

        with patch("studyboard.gui.get_study_insight", return_value="Brava!") as insight:
            gui.show_insight()

        insight.assert_called_once_with({"Math": 10}, "key", "gemini-2.5-flash")
        gui.insight_var.set.assert_called_with("Brava!")

    def test_reset_disables_button_again(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        tracker.log_session("Math", 10)

        with patch("studyboard.gui.messagebox.askyesno", return_value=True):
            gui.confirm_reset()

        gui.insight_button.config.assert_called_with(state="disabled")


class TestSubjectSuggestions:
    def test_suggestions_follow_leaderboard(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        gui.subject_box.config.assert_called_with(values=[])

        tracker.log_session("Math", 10)
        tracker.log_session("Art", 30)

        gui.subject_box.config.assert_called_with(values=["Art", "Math"])

    def test_manual_log_uses_form(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        gui.subject_var.get.return_value = "Latin"
        gui.minutes_var.get.return_value = "25"

        gui.log_manual()

        assert tracker.summary() == {"Latin": 25}

    def test_manual_log_rejects_bad_minutes(self, gui: StudyGUI, tracker: StudyTracker) -> None:
        gui.subject_var.get.return_value = "Latin"
        gui.minutes_var.get.return_value = "²"

        gui.log_manual()

        assert tracker.summary() == {}
