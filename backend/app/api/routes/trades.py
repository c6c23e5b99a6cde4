"""Trade import, pip/tick distance and CSV export endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import ValidationError

from app.config import get_settings
from app.schemas import (
    CanonicalTradeSchema,
    DistanceRequest,
    DistanceResponse,
    ExportRequest,
    ImportRequest,
    ImportResponse,
)
from trade_journal import (
    EmptyFileError,
    FormatError,
    InsufficientInputError,
    classify_instrument,
    compute_distance,
    export_csv,
    import_trades,
)

router = APIRouter()
logger = logging.getLogger(__name__)


async def _read_import_payload(request: Request) -> str:
    settings = get_settings()
    body = await request.body()
    if len(body) > settings.max_import_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Import exceeds {settings.max_import_bytes} bytes",
        )
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            return ImportRequest.model_validate_json(body).content
        except ValidationError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=exc.errors(include_url=False),
            ) from exc
    return body.decode("utf-8-sig", errors="replace")


@router.post("/import", response_model=ImportResponse)
async def import_trade_history(request: Request) -> ImportResponse:
    """Parse a broker export (MT4/MT5, cTrader or TradingView) into candidates.

    The body is the raw CSV text, or JSON ``{"content": "..."}``. Nothing is
    saved; the caller reviews and persists the candidates it wants to keep.
    """

    raw_text = await _read_import_payload(request)
    try:
        result = import_trades(raw_text)
    except (FormatError, EmptyFileError) as exc:
        logger.info("Import rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return ImportResponse(
        format=result.format,
        count=len(result.trades),
        trades=[CanonicalTradeSchema.from_candidate(trade) for trade in result.trades],
    )


@router.post("/distance", response_model=DistanceResponse)
async def trade_distance(payload: DistanceRequest) -> DistanceResponse:
    """Return the pip or tick count between an entry and an exit price."""

    try:
        count = compute_distance(payload.symbol, payload.entry_price, payload.exit_price)
    except InsufficientInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    instrument = classify_instrument(str(payload.symbol).strip())
    return DistanceResponse(
        pips_or_ticks=count,
        unit=instrument.unit,
        unit_size=instrument.unit_size,
        instrument_class=instrument.name,
    )


@router.post("/export")
async def export_trades(payload: ExportRequest) -> Response:
    """Download trades as a seven-column CSV file."""

    content = export_csv(trade.to_record() for trade in payload.trades)
    filename = f"trades_{payload.date}.csv" if payload.date else "trades.csv"
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


__all__ = ["router"]
