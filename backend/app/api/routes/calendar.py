"""Month calendar and journal grouping endpoints."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter

from app.config import get_settings
from app.schemas import JournalRequest, JournalResponse, MonthViewRequest, MonthViewResponse
from trade_journal import build_month_view, group_journal

router = APIRouter()


@router.post("/month", response_model=MonthViewResponse)
async def month_view(payload: MonthViewRequest) -> MonthViewResponse:
    """Bucket the supplied trades into day cells and week rows.

    ``year``/``month_index`` default to the current month in the configured
    timezone.
    """

    settings = get_settings()
    year, month_index = payload.year, payload.month_index
    if year is None or month_index is None:
        now = datetime.now(ZoneInfo(settings.timezone))
        year = now.year if year is None else year
        month_index = now.month - 1 if month_index is None else month_index
    spill = payload.spill_previous_month
    if spill is None:
        spill = settings.week_spill_previous_month

    view = build_month_view(
        [trade.to_record() for trade in payload.trades],
        year,
        month_index,
        spill_previous_month=spill,
    )
    return MonthViewResponse.from_view(view)


@router.post("/journal", response_model=JournalResponse)
async def journal_groups(payload: JournalRequest) -> JournalResponse:
    """Group the supplied trades by year, month and week of month."""

    groups = group_journal(
        [trade.to_record() for trade in payload.trades],
        account_id=payload.account_id,
    )
    count = sum(
        len(trades)
        for months in groups.values()
        for weeks in months.values()
        for trades in weeks.values()
    )
    return JournalResponse(groups=groups, count=count)


__all__ = ["router"]
