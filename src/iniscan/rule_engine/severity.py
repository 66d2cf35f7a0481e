"""Severity labels and their ordinal ranks."""

from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


LEVEL_RANKS: dict[str, int] = {
    Severity.WARNING: 10,
    Severity.ERROR: 20,
    Severity.FATAL: 30,
}


def severity_rank(level: str | None) -> int:
    """Return the ordinal rank for a severity label; unknown labels rank 0."""
    if level is None:
        return 0
    return LEVEL_RANKS.get(level.lower(), 0)
