from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from studyboard.subjects import SubjectTotal

MEDALS = ["🥇", "🥈", "🥉"]
EMPTY_LEADERBOARD = "Nessun campione ancora. Registra una sessione per iniziare!"


@dataclass(frozen=True)
class Level:
    title: str
    percent: float


# (minimum minutes, title, minutes used as the progress target)
_LEVELS = [
    (1200, "Grand Scholar", None),
    (600, "Subject Master", 1200),
    (300, "Knowledge Seeker", 600),
    (120, "Dedicated Student", 300),
    (0, "Novice Learner", 120),
]


def level_for(total_minutes: int) -> Level:
    """Map overall study minutes to a level title and a progress percentage."""
    for threshold, title, target in _LEVELS:
        if total_minutes >= threshold:
            if target is None:
                return Level(title, 100.0)
            return Level(title, min(total_minutes / target * 100, 100.0))
    return Level("Novice Learner", 0.0)


def format_minutes(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def rank_label(position: int) -> str:
    """Medal for the podium, ``#n`` for everyone else (0-based position)."""
    if position < len(MEDALS):
        return MEDALS[position]
    return f"#{position + 1}"


def leaderboard_lines(ranked: Sequence[SubjectTotal]) -> List[str]:
    if not ranked:
        return []
    top = ranked[0].total_minutes
    lines = []
    for pos, entry in enumerate(ranked):
        percent = round(entry.total_minutes / top * 100) if top else 0
        lines.append(
            f"{rank_label(pos)} {entry.name} - {format_minutes(entry.total_minutes)} ({percent}% del primo)"
        )
    return lines


def format_leaderboard(ranked: Sequence[SubjectTotal]) -> str:
    lines = leaderboard_lines(ranked)
    if not lines:
        return EMPTY_LEADERBOARD
    return "\n".join(["🏆 Classifica", *lines])
