"""Lenient numeric helpers shared by calculators and views."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_THOUSANDS_SEPARATOR = re.compile(r"[,\s]")


def coerce_number(value: Any) -> float:
    """Return ``value`` as a float, treating absent or malformed input as 0.

    Accepts ints, floats, numeric strings and thousands-formatted strings such
    as ``"1,200"``. ``None``, NaN, booleans and unparsable text become ``0.0``.
    """

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = _THOUSANDS_SEPARATOR.sub("", value)
        if not cleaned:
            return 0.0
        try:
            number = float(cleaned)
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
    if math.isnan(number):
        return 0.0
    return number


def optional_number(value: Any) -> Optional[float]:
    """Like :func:`coerce_number` but keeps ``None`` as ``None``."""

    if value is None:
        return None
    return coerce_number(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +infinity."""

    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


_SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size: Any) -> str:
    """Human readable byte count with one decimal, ``-`` for empty sizes."""

    number = coerce_number(size)
    if number <= 0:
        return "-"
    index = 0
    while number >= 1024 and index < len(_SIZE_UNITS) - 1:
        number /= 1024
        index += 1
    return f"{number:.1f} {_SIZE_UNITS[index]}"
