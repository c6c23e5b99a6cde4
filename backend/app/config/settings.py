"""Application configuration and environment helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_TIMEZONE = "UTC"
DEFAULT_MAX_IMPORT_BYTES = 5 * 1024 * 1024


class AppSettings(BaseSettings):
    """Configuration options for the trade journal service."""

    app_name: str = Field(default="Trade Journal")
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    log_level: str = Field(default="INFO")

    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost",
            "http://127.0.0.1",
        ]
    )

    max_import_bytes: int = Field(
        default=DEFAULT_MAX_IMPORT_BYTES,
        gt=0,
        description="Largest broker export accepted by the import endpoint.",
    )
    default_trade_environment: Literal["live", "demo", "backtest"] = Field(default="live")
    week_spill_previous_month: bool = Field(
        default=False,
        description="Let the first calendar week row reach into the previous month.",
    )

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="trade-journal")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"telemetry_otlp_endpoint"}
        return {k: ("***" if k in hidden and v else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """Return cached application settings with optional overrides."""

    if overrides:
        return AppSettings(**overrides)
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_MAX_IMPORT_BYTES",
    "DEFAULT_TIMEZONE",
    "get_settings",
]
