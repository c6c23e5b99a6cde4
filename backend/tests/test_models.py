from __future__ import annotations

import dataclasses

import pytest

from trade_journal import (
    CanonicalTrade,
    Direction,
    Outcome,
    TakeProfitLevel,
    Trade,
    TradeEnvironment,
)
from trade_journal.models import outcome_for


def _candidate(**overrides) -> CanonicalTrade:
    values = dict(
        symbol="EURUSD",
        direction=Direction.BUY,
        quantity=2.0,
        entry_price=1.1,
        exit_price=1.105,
        stop_loss=1.095,
        take_profit=1.11,
        date="2024-03-05",
        entry_time="10:00",
        exit_time="11:00",
        profit_loss=100.0,
        provenance="Imported from cTrader",
    )
    values.update(overrides)
    return CanonicalTrade(**values)


@pytest.mark.parametrize(
    ("pnl", "expected"),
    [(0.5, Outcome.WIN), (-0.25, Outcome.LOSS), (0.0, Outcome.BREAKEVEN), (-0.0, Outcome.BREAKEVEN), (None, Outcome.BREAKEVEN)],
)
def test_outcome_for(pnl, expected) -> None:
    assert outcome_for(pnl) is expected


def test_outcome_cannot_be_set() -> None:
    trade = _candidate()
    with pytest.raises(dataclasses.FrozenInstanceError):
        trade.outcome = Outcome.LOSS  # type: ignore[misc]
    assert dataclasses.replace(trade, profit_loss=-1.0).outcome is Outcome.LOSS


def test_from_candidate_promotes_take_profit_and_notes() -> None:
    trade = Trade.from_candidate(_candidate(), account_id="acc-1", trade_environment="demo")
    assert trade.account_id == "acc-1"
    assert trade.trade_environment is TradeEnvironment.DEMO
    assert trade.take_profit_levels == (TakeProfitLevel(price=1.11, quantity=2.0),)
    assert trade.notes == "Imported from cTrader"
    assert trade.pips_or_ticks == 0


def test_from_candidate_without_take_profit() -> None:
    trade = Trade.from_candidate(_candidate(take_profit=None), notes="manual review")
    assert trade.take_profit_levels == ()
    assert trade.notes == "manual review"
    assert trade.trade_environment is TradeEnvironment.LIVE


def test_to_record_shapes() -> None:
    record = _candidate().to_record()
    assert record["direction"] == "buy"
    assert record["outcome"] == "WIN"
    trade_record = Trade.from_candidate(_candidate(), account_id="acc-1").to_record()
    assert trade_record["take_profit_levels"] == [{"price": 1.11, "quantity": 2.0}]
    assert trade_record["trade_environment"] == "live"
    assert set(record) <= set(trade_record)
