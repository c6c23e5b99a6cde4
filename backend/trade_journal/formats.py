"""Broker export detection.

Each supported export is identified by a pair of header tokens. Signatures are
checked in order and the first match wins, so formats whose headers overlap
resolve deterministically. New formats are appended to ``FORMAT_SIGNATURES``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence, Tuple

from .errors import FormatError

logger = logging.getLogger(__name__)


class FormatKind(str, Enum):
    MT4 = "MT4"
    CTRADER = "CTRADER"
    TRADINGVIEW = "TRADINGVIEW"


FORMAT_SIGNATURES: Tuple[Tuple[FormatKind, Tuple[str, str]], ...] = (
    (FormatKind.MT4, ("ticket", "open time")),
    (FormatKind.CTRADER, ("id", "entry time")),
    (FormatKind.TRADINGVIEW, ("date", "strategy")),
)


def split_header(line: str) -> list[str]:
    """Split a comma-delimited header line into trimmed column names."""

    return [token.strip() for token in line.split(",")]


def detect(header_row: Sequence[str]) -> FormatKind:
    """Classify a header row into a known export format.

    Raises ``FormatError`` when no signature matches.
    """

    tokens = {str(token).strip().lower() for token in header_row}
    for kind, signature in FORMAT_SIGNATURES:
        if all(column in tokens for column in signature):
            return kind
    logger.warning("Rejected import with unrecognised header: %s", list(header_row))
    raise FormatError(header_row)


__all__ = ["FORMAT_SIGNATURES", "FormatKind", "detect", "split_header"]
