from __future__ import annotations

import pytest

from trade_journal import (
    Direction,
    EmptyFileError,
    FormatError,
    FormatKind,
    Outcome,
    import_file,
    import_trades,
)
from trade_journal.importer import split_lines

MT4_EXPORT = """Ticket,Open Time,Type,Size,Item,Price,S/L,T/P,Close Time,Profit
5001,2024.03.05 10:00,buy,1.0,EURUSD,1.1000,,,2024.03.05 11:45,50
5002,2024.03.05 13:00,sell,0.5,USDJPY,150.20,150.70,149.20,2024.03.05 15:10,-20.5
5003,2024.03.01 00:00,balance,,,,,,,1000
"""


def test_mt4_export_produces_candidates() -> None:
    trades = import_file(MT4_EXPORT)
    assert len(trades) == 2
    first = trades[0]
    assert first.direction is Direction.BUY
    assert first.quantity == 1.0
    assert first.entry_price == pytest.approx(1.1)
    assert first.profit_loss == 50
    assert first.outcome is Outcome.WIN
    assert first.date == "2024-03-05"
    assert "MetaTrader" in first.provenance
    assert trades[1].take_profit == pytest.approx(149.2)
    assert trades[1].outcome is Outcome.LOSS


def test_import_trades_reports_format() -> None:
    result = import_trades(MT4_EXPORT)
    assert result.format is FormatKind.MT4
    assert [t.symbol for t in result.trades] == ["EURUSD", "USDJPY"]


def test_windows_line_endings_and_bom_are_accepted() -> None:
    payload = "\ufeff" + MT4_EXPORT.replace("\n", "\r\n")
    trades = import_file(payload)
    assert len(trades) == 2
    assert trades[0].exit_time == "11:45"
    assert trades[0].profit_loss == 50


def test_bytes_payload_is_decoded() -> None:
    assert len(import_file(MT4_EXPORT.encode("utf-8-sig"))) == 2


def test_ctrader_export() -> None:
    payload = (
        "ID,Symbol,Type,Volume,EntryPrice,ExitPrice,Entry Time,EntryTime,ExitTime,NetProfit\n"
        "11,XAUUSD,Sell,1,2050.5,2045.5,,2024.02.29 08:00:00,2024.02.29 09:30:00,500\n"
    )
    result = import_trades(payload)
    assert result.format is FormatKind.CTRADER
    (trade,) = result.trades
    assert trade.date == "2024-02-29"
    assert trade.profit_loss == 500


def test_tradingview_export() -> None:
    payload = (
        "Trade #,Strategy,Order,Symbol,Date,Price,Exit Price,Profit\n"
        "1,ORB,sell,ES1!,2024-03-08 09:31,5150.25,5140.25,500\n"
    )
    (trade,) = import_file(payload)
    assert trade.direction is Direction.SELL
    assert trade.quantity == 1
    assert trade.date == "2024-03-08"


def test_unrecognised_header_raises_format_error() -> None:
    payload = "Symbol,Side,Qty,Price\nAAPL,Buy,10,190.5\n"
    with pytest.raises(FormatError, match="unsupported format"):
        import_file(payload)


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "   \n  ",
        "Ticket,Open Time,Type,Size,Item,Price,S/L,T/P,Close Time,Profit",
        "Ticket,Open Time,Type,Size,Item,Price,S/L,T/P,Close Time,Profit\n\n",
    ],
)
def test_payload_without_data_rows_raises_empty_file_error(payload: str) -> None:
    with pytest.raises(EmptyFileError, match="no data found"):
        import_file(payload)


def test_empty_check_runs_before_detection() -> None:
    with pytest.raises(EmptyFileError):
        import_file("Symbol,Side")


def test_rows_with_unknown_direction_only_shrink_the_result() -> None:
    header = "Ticket,Open Time,Type,Size,Item,Price,S/L,T/P,Close Time,Profit"
    good = "1,2024.03.05 10:00,buy,1,EURUSD,1.1,,,2024.03.05 11:00,5"
    bad = "2,2024.03.05 10:00,deposit,,,,,,,100"
    payload = "\n".join([header, good, bad, good, bad, bad])
    assert len(import_file(payload)) == 2


def test_import_is_idempotent() -> None:
    assert import_file(MT4_EXPORT) == import_file(MT4_EXPORT)


def test_split_lines() -> None:
    assert split_lines("a,b\r\n1,2\r\n") == ["a,b", "1,2"]
    assert split_lines("") == []
