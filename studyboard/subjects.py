from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List


@dataclass(frozen=True)
class SubjectTotal:
    """Accumulated study minutes for one subject."""

    name: str
    total_minutes: int


class InvalidSession(ValueError):
    """Raised when a session has a blank subject or a non-positive duration."""


def validate_session(name: str, minutes: int) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidSession("subject name must not be blank")
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidSession(f"minutes must be an integer, got {minutes!r}")
    if minutes <= 0:
        raise InvalidSession(f"minutes must be positive, got {minutes}")


def find_subject(subjects: List[SubjectTotal], name: str) -> int:
    """Return the index of ``name`` (case-insensitive) or -1."""
    wanted = name.lower()
    for i, entry in enumerate(subjects):
        if entry.name.lower() == wanted:
            return i
    return -1


def merge(subjects: List[SubjectTotal], name: str, minutes: int) -> List[SubjectTotal]:
    """Fold ``minutes`` into the matching subject, or append a new one.

    The first-seen casing of a name is kept. ``minutes`` is trusted to be a
    positive integer; see :func:`validate_session`.
    """
    idx = find_subject(subjects, name)
    if idx != -1:
        current = subjects[idx]
        subjects[idx] = replace(current, total_minutes=current.total_minutes + minutes)
    else:
        subjects.append(SubjectTotal(name=name, total_minutes=minutes))
    return subjects


def reset(subjects: List[SubjectTotal]) -> List[SubjectTotal]:
    subjects.clear()
    return subjects


def summarize(subjects: List[SubjectTotal]) -> Dict[str, int]:
    return {s.name: s.total_minutes for s in subjects}
