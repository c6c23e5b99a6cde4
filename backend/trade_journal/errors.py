"""Exceptions raised by the trade journal core."""

from __future__ import annotations

from typing import Sequence


class TradeJournalError(Exception):
    """Base class for every error surfaced by the core."""


class FormatError(TradeJournalError, ValueError):
    """The header row does not match any supported broker export."""

    def __init__(self, header: Sequence[str] = ()) -> None:
        super().__init__("unsupported format")
        self.header = tuple(header)


class EmptyFileError(TradeJournalError, ValueError):
    """The payload holds no data row below its header."""

    def __init__(self) -> None:
        super().__init__("no data found")


class InsufficientInputError(TradeJournalError, ValueError):
    """A distance computation was requested without symbol or prices."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"missing required input: {', '.join(self.missing)}")


__all__ = [
    "TradeJournalError",
    "FormatError",
    "EmptyFileError",
    "InsufficientInputError",
]
