"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .calendar import router as calendar_router
from .trades import router as trades_router

api_router = APIRouter()
api_router.include_router(trades_router, prefix="/trades", tags=["trades"])
api_router.include_router(calendar_router, prefix="/calendar", tags=["calendar"])

__all__ = ["api_router"]
