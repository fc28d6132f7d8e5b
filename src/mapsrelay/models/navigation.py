"""Normalized navigation event relayed to the display sink."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, field_validator

from mapsrelay.models._base import RelayBaseModel
from mapsrelay.models.symbols import DirectionSymbol


class NavigationEvent(RelayBaseModel):
    """A classified, carry-forward-normalized guidance update."""

    symbol: DirectionSymbol = DirectionSymbol.UNKNOWN
    distance: str = Field(..., description="Last non-empty distance seen")
    maneuver_text: str = ""
    time_dist_info: str | None = Field(default=None, description='e.g. "3 min · 240 m"')
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
