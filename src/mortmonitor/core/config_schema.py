"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``MortMonitorConfig``
instance.  Existing dict-based access continues to work unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class LoggingConfig(BaseModel):
    """Loguru sink settings."""

    level: str = "WARNING"
    file: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"unknown log level {v!r}; expected one of {_LOG_LEVELS}")
        return v


class RefinanceConfig(BaseModel):
    """Market assumptions for refinance comparisons."""

    conforming_limit: float = Field(default=766_550, gt=0)
    terms: list[int] = [30, 15]
    default_closing_costs: float = Field(default=0, ge=0)

    @field_validator("terms")
    @classmethod
    def _positive_terms(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("at least one refinance term is required")
        if any(t <= 0 for t in v):
            raise ValueError(f"refinance terms must be positive: {v}")
        return v


class AlertsConfig(BaseModel):
    """Alert template defaults."""

    pmi_removal_ltv: float = Field(default=80, gt=0, le=100)


class MortMonitorConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so deployments can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.mortmonitor"))
    logging: LoggingConfig = LoggingConfig()
    refinance: RefinanceConfig = RefinanceConfig()
    alerts: AlertsConfig = AlertsConfig()
