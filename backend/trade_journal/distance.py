"""Pip/tick distance between an entry and an exit price.

Instruments are classified by substring match on the upper-cased symbol.
The unit table mirrors the conventions traders expect; extend the tables to
support a new instrument class rather than changing ``compute_distance``.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InsufficientInputError
from .models import Trade
from .numbers import parse_optional_number, round_half_up

FUTURES_ROOTS: Tuple[str, ...] = ("ES", "NQ", "CL", "GC", "YM")


@dataclass(frozen=True)
class InstrumentClass:
    name: str
    unit: str
    unit_size: float
    markers: Tuple[str, ...] = ()


FUTURES_CLASSES: Tuple[InstrumentClass, ...] = (
    InstrumentClass("index_future", "tick", 0.25, ("ES", "NQ", "YM")),
    InstrumentClass("energy_future", "tick", 0.01, ("CL",)),
    InstrumentClass("metal_future", "tick", 0.1, ("GC",)),
)
FUTURES_FALLBACK = InstrumentClass("future", "tick", 0.01)

CURRENCY_CLASSES: Tuple[InstrumentClass, ...] = (
    InstrumentClass("jpy_currency", "pip", 0.01, ("JPY",)),
)
CURRENCY_FALLBACK = InstrumentClass("currency", "pip", 0.0001)


def _first_match(symbol: str, classes: Tuple[InstrumentClass, ...], fallback: InstrumentClass) -> InstrumentClass:
    for instrument in classes:
        if any(marker in symbol for marker in instrument.markers):
            return instrument
    return fallback


def classify_instrument(symbol: str) -> InstrumentClass:
    """Return the instrument class, and so the unit size, for ``symbol``."""

    sym = symbol.upper()
    if any(root in sym for root in FUTURES_ROOTS):
        return _first_match(sym, FUTURES_CLASSES, FUTURES_FALLBACK)
    return _first_match(sym, CURRENCY_CLASSES, CURRENCY_FALLBACK)


def _price(value: Any) -> float | None:
    number = parse_optional_number(value)
    if number is None or math.isinf(number):
        return None
    return number


def compute_distance(symbol: str | None, entry_price: Any, exit_price: Any) -> int:
    """Return the rounded number of pips or ticks between two prices.

    Raises ``InsufficientInputError`` when the symbol or either price is
    missing, blank or unreadable.
    """

    entry = _price(entry_price)
    exit_ = _price(exit_price)
    missing = []
    if symbol is None or not str(symbol).strip():
        missing.append("symbol")
    if entry is None:
        missing.append("entry_price")
    if exit_ is None:
        missing.append("exit_price")
    if missing:
        raise InsufficientInputError(missing)

    instrument = classify_instrument(str(symbol).strip())
    diff = abs(exit_ - entry)
    return round_half_up(diff / instrument.unit_size)


def enrich_with_distance(trade: Trade) -> Trade:
    """Return a copy of ``trade`` with ``pips_or_ticks`` filled in."""

    count = compute_distance(trade.symbol, trade.entry_price, trade.exit_price)
    return dataclasses.replace(trade, pips_or_ticks=count)


__all__ = [
    "CURRENCY_CLASSES",
    "FUTURES_CLASSES",
    "FUTURES_ROOTS",
    "InstrumentClass",
    "classify_instrument",
    "compute_distance",
    "enrich_with_distance",
]
