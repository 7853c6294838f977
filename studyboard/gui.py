from __future__ import annotations
import tkinter as tk
from tkinter import messagebox, ttk
from typing import List

from studyboard.advisor import get_study_insight
from studyboard.config import Settings
from studyboard.levels import EMPTY_LEADERBOARD, format_minutes, leaderboard_lines
from studyboard.session_timer import SessionTimer
from studyboard.subjects import InvalidSession, SubjectTotal
from studyboard.telegram_notifier import TelegramNotifier
from studyboard.tracker import StudyTracker


class StudyGUI:
    """Tkinter interface: timer, manual log, leaderboard and advice."""

    def __init__(self, tracker: StudyTracker, notifier: TelegramNotifier,
                 settings: Settings) -> None:
        self.tracker = tracker
        self.notifier = notifier
        self.settings = settings
        self.timer = SessionTimer(self._log, notifier)
        self.root = tk.Tk()
        self.root.title("Study Leaderboard")

        self.subject_var = tk.StringVar()
        self.minutes_var = tk.StringVar()
        self.clock_var = tk.StringVar(value="0")
        self.level_var = tk.StringVar()
        self.status_var = tk.StringVar()
        self.insight_var = tk.StringVar()

        form = tk.Frame(self.root)
        form.pack(padx=10, pady=10, fill="x")
        tk.Label(form, text="Materia").grid(row=0, column=0, sticky="w")
        self.subject_box = ttk.Combobox(form, textvariable=self.subject_var)
        self.subject_box.grid(row=0, column=1)
        tk.Label(form, text="Minuti / obiettivo").grid(row=1, column=0, sticky="w")
        tk.Entry(form, textvariable=self.minutes_var, width=6).grid(row=1, column=1, sticky="w")
        tk.Button(form, text="Registra", command=self.log_manual).grid(row=2, column=0, pady=5)

        self.button = tk.Button(self.root, text="ON", width=20, command=self.toggle)
        self.button.pack(pady=5)
        self.pause_button = tk.Button(self.root, text="Pausa", width=20,
                                      command=self.timer.toggle_pause, state="disabled")
        self.pause_button.pack()
        tk.Label(self.root, textvariable=self.clock_var, font=("Arial", 24)).pack()
        tk.Label(self.root, textvariable=self.level_var).pack()

        self.board = tk.Listbox(self.root, width=50, height=10)
        self.board.pack(padx=10, pady=5)

        actions = tk.Frame(self.root)
        actions.pack(pady=5)
        self.insight_button = tk.Button(actions, text="Consiglio", command=self.show_insight)
        self.insight_button.pack(side="left", padx=5)
        tk.Button(actions, text="Reset", command=self.confirm_reset).pack(side="left", padx=5)
        tk.Label(self.root, textvariable=self.insight_var, wraplength=350).pack()
        tk.Label(self.root, textvariable=self.status_var, fg="gray").pack(pady=5)

        self.tracker.subscribe(self.refresh_board)
        self.refresh_board(self.tracker.leaderboard)
        self._update_clock()

    def toggle(self) -> None:
        if not self.timer.is_active:
            subject = self.subject_var.get().strip()
            if not subject:
                self.status_var.set("Scrivi una materia prima di iniziare.")
                return
            self.timer.start(subject, self._goal())
            self.notifier.send_message(f"Sto studiando {subject}")
            self.button.config(text="OFF")
            self.pause_button.config(state="normal")
        else:
            self.timer.stop()
            self.clock_var.set("0")
            self.button.config(text="ON")
            self.pause_button.config(state="disabled", text="Pausa")

    def log_manual(self) -> None:
        subject = self.subject_var.get()
        try:
            self._log(subject, int(self.minutes_var.get()))
        except (InvalidSession, ValueError):
            self.status_var.set("Inserisci una materia e un numero di minuti positivo.")
            return
        self.subject_var.set("")
        self.minutes_var.set("")

    def confirm_reset(self) -> None:
        if messagebox.askyesno("Reset", "Vuoi davvero cancellare tutti i dati?"):
            self.timer.reset()
            self.tracker.reset()
            self.clock_var.set("0")
            self.button.config(text="ON")
            self.pause_button.config(state="disabled", text="Pausa")
            self.insight_var.set("")
            self.status_var.set("Tutti i dati cancellati")

    def show_insight(self) -> None:
        summary = self.tracker.summary()
        if not summary:
            self.status_var.set("Registra una sessione prima di chiedere un consiglio.")
            return
        advice = get_study_insight(summary, self.settings.gemini_api_key,
                                   self.settings.gemini_model)
        self.insight_var.set(advice)

    def refresh_board(self, ranked: List[SubjectTotal]) -> None:
        self.board.delete(0, tk.END)
        for line in leaderboard_lines(ranked) or [EMPTY_LEADERBOARD]:
            self.board.insert(tk.END, line)
        self.subject_box.config(values=[s.name for s in ranked])
        self.insight_button.config(state="normal" if ranked else "disabled")
        level = self.tracker.level()
        total = format_minutes(self.tracker.total_minutes())
        self.level_var.set(f"{level.title} ({level.percent:.0f}%) - totale {total}")

    def _log(self, subject: str, minutes: int) -> None:
        self.tracker.log_session(subject, minutes)
        self.status_var.set(f"Registrati {format_minutes(minutes)} per {subject.strip()}")

    def _goal(self) -> int | None:
        raw = self.minutes_var.get().strip()
        return int(raw) if raw.isdecimal() and int(raw) > 0 else None

    def _update_clock(self) -> None:
        if self.timer.is_active:
            self.clock_var.set(str(self.timer.elapsed_minutes()))
            self.pause_button.config(text="Riprendi" if self.timer.is_paused else "Pausa")
            if self.timer.check_goal():
                self.status_var.set(f"🎉 Obiettivo di {self.timer.goal} minuti raggiunto!")
        self.root.after(1000, self._update_clock)

    def run(self) -> None:
        self.root.mainloop()
