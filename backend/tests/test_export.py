from __future__ import annotations

from trade_journal import CanonicalTrade, Direction, Trade, export_csv, export_row
from trade_journal.export import EXPORT_HEADER


def test_header_line() -> None:
    assert export_csv([]) == "Symbol,Direction,Entry,Exit,P&L,Account,Notes"
    assert len(EXPORT_HEADER) == 7


def test_mapping_row_quotes_strings() -> None:
    record = {
        "symbol": "EURUSD",
        "direction": "buy",
        "entry_price": 1.1,
        "exit_price": 1.105,
        "profit_loss": 50.0,
        "trading_accounts": {"account_name": "FTMO 100k", "broker": "FTMO"},
        "notes": 'Took "A+" setup',
    }
    assert export_row(record) == '"EURUSD","buy",1.1,1.105,50,"FTMO 100k","Took ""A+"" setup"'


def test_missing_and_zero_numbers_render_empty() -> None:
    record = {"symbol": "ES", "direction": "sell", "entry_price": None, "exit_price": 0, "profit_loss": 0}
    assert export_row(record) == '"ES","sell",,,,"",""'


def test_trade_objects_export_with_account_and_notes() -> None:
    candidate = CanonicalTrade(
        symbol="USDJPY",
        direction=Direction.SELL,
        quantity=0.5,
        entry_price=150.2,
        exit_price=150.7,
        profit_loss=-20.5,
        provenance="Imported from MetaTrader",
    )
    trade = Trade.from_candidate(candidate, account_id="acc-42")
    lines = export_csv([trade, trade.to_record()]).split("\n")
    assert len(lines) == 3
    expected = '"USDJPY","sell",150.2,150.7,-20.5,"acc-42","Imported from MetaTrader"'
    assert lines[1] == expected
    assert lines[2] == expected


def test_small_prices_are_not_written_in_exponent_form() -> None:
    line = export_row({"symbol": "SHIBUSD", "direction": "buy", "entry_price": 0.00001, "exit_price": 1.5e-07})
    assert line.split(",")[2:4] == ["0.00001", "0.00000015"]
