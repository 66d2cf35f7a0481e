"""Normalize raw ini values into canonical int/byte-size forms."""

from __future__ import annotations

import re
from typing import Any

_POWERS: dict[str, int] = {
    "K": 1024,
    "M": 1024 * 1024,
    "G": 1024 * 1024 * 1024,
}

_POWERS_RE = re.compile(r"^([0-9]+)([KMG])$")


def _is_one_of(value: Any, candidates: tuple[Any, ...]) -> bool:
    # bool is an int subclass; True/False must not collapse into 1/0
    if isinstance(value, bool):
        return False
    return any(type(value) is type(c) and value == c for c in candidates)


def cast_value(value: Any) -> Any:
    """Map On/Off style values to 1/0, then expand byte-size suffixes."""
    if _is_one_of(value, ("Off", "", 0, "0")):
        casted: Any = 0
    elif _is_one_of(value, ("On", "1", 1)):
        casted = 1
    else:
        casted = value
    return cast_powers(casted)


def cast_powers(value: Any) -> Any:
    """Expand "8M" style values to bytes. Non-matching input is returned as-is."""
    if not isinstance(value, str):
        return value
    match = _POWERS_RE.fullmatch(value)
    if match is None:
        return value
    return int(match.group(1)) * _POWERS[match.group(2)]
