"""Trade import normalization and calendar aggregation for the trade journal."""

from .aggregation import (
    MonthView,
    TradeSummary,
    build_month_view,
    filter_by_account,
    group_journal,
    summarize_trades,
)
from .distance import classify_instrument, compute_distance, enrich_with_distance
from .errors import EmptyFileError, FormatError, InsufficientInputError, TradeJournalError
from .export import export_csv, export_row
from .formats import FormatKind, detect
from .importer import ImportResult, import_file, import_trades
from .models import (
    CanonicalTrade,
    DayBucket,
    Direction,
    Outcome,
    TakeProfitLevel,
    Trade,
    TradeEnvironment,
    WeekBucket,
)
from .normalizers import normalize_rows

__all__ = [
    "CanonicalTrade",
    "DayBucket",
    "Direction",
    "EmptyFileError",
    "FormatError",
    "FormatKind",
    "ImportResult",
    "InsufficientInputError",
    "MonthView",
    "Outcome",
    "TakeProfitLevel",
    "Trade",
    "TradeEnvironment",
    "TradeJournalError",
    "TradeSummary",
    "WeekBucket",
    "build_month_view",
    "classify_instrument",
    "compute_distance",
    "detect",
    "enrich_with_distance",
    "export_csv",
    "export_row",
    "filter_by_account",
    "group_journal",
    "import_file",
    "import_trades",
    "normalize_rows",
    "summarize_trades",
]
