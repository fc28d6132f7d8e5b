"""Base model and shared field types.

Notification extras arrive as loosely-typed values (``CharSequence`` on the
phone, arbitrary JSON after the bridge). :data:`OptionalText` coerces those
to ``str`` while keeping ``None`` as "field absent".
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def coerce_text(value: Any) -> str | None:
    """Return *value* as text, or ``None`` when it is absent."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def utcnow() -> datetime:
    return datetime.now(UTC)


OptionalText = Annotated[str | None, BeforeValidator(coerce_text)]
"""Annotated type that coerces notification extras to ``str`` or ``None``."""


class RelayBaseModel(BaseModel):
    """Base for immutable mapsrelay value objects."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
