"""Lenient numeric parsing shared by the import normalizers.

Broker exports are frequently hand edited, so a malformed numeric cell must
never abort an import. These helpers implement that contract explicitly:
required numbers default to ``0.0`` and optional price levels default to
``None``. Only the leading numeric prefix of a cell is read, so values such as
``"50 USD"`` still parse to ``50.0``.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_number(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    text = str(value).strip()
    if not text:
        return None
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(0))


def parse_number(value: Any) -> float:
    """Return ``value`` as a float, or ``0.0`` when it cannot be read."""

    number = _leading_number(value)
    return 0.0 if number is None else number


def parse_optional_number(value: Any) -> float | None:
    """Return ``value`` as a float, or ``None`` when blank or unreadable."""

    return _leading_number(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded away from zero."""

    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


__all__ = ["parse_number", "parse_optional_number", "round_half_up"]
