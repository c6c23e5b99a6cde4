"""Import pipeline turning a broker export into trade candidates."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from opentelemetry import trace

from .errors import EmptyFileError
from .formats import FormatKind, detect, split_header
from .models import CanonicalTrade
from .normalizers import normalize_rows

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass(frozen=True)
class ImportResult:
    format: FormatKind
    trades: List[CanonicalTrade] = field(default_factory=list)


def split_lines(raw_text: str | bytes) -> list[str]:
    """Return the non-trailing lines of a payload, header first."""

    if isinstance(raw_text, bytes):
        raw_text = raw_text.decode("utf-8-sig", errors="replace")
    text = raw_text.lstrip("\ufeff").strip()
    if not text:
        return []
    return [line.rstrip("\r") for line in text.split("\n")]


def import_trades(raw_text: str | bytes) -> ImportResult:
    """Detect the export format and normalize every data row.

    Raises ``EmptyFileError`` when the payload has no data row and
    ``FormatError`` when the header is not recognised. Already-saved trades
    are not deduplicated here.
    """

    with tracer.start_as_current_span("trade_journal.import_file") as span:
        lines = split_lines(raw_text)
        if len(lines) < 2:
            raise EmptyFileError()
        header_row = split_header(lines[0])
        kind = detect(header_row)
        trades = normalize_rows(kind, header_row, lines[1:])
        span.set_attribute("trade_journal.format", kind.value)
        span.set_attribute("trade_journal.trade_count", len(trades))
        logger.info(
            "Imported %d trade(s) from %d %s row(s)",
            len(trades),
            len(lines) - 1,
            kind.value,
        )
        return ImportResult(format=kind, trades=trades)


def import_file(raw_text: str | bytes) -> list[CanonicalTrade]:
    """Return the trade candidates contained in ``raw_text``."""

    return import_trades(raw_text).trades


__all__ = ["ImportResult", "import_file", "import_trades", "split_lines"]
