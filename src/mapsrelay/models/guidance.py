"""Posted source notifications and the guidance extracted from them."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from mapsrelay._constants import EXTRA_SUB_TEXT, EXTRA_TEXT, EXTRA_TITLE
from mapsrelay.models._base import OptionalText, RelayBaseModel, utcnow


class PostedNotification(RelayBaseModel):
    """A notification observed by a notification source."""

    package: str = Field(validation_alias=AliasChoices("package", "packageName", "package_name"))
    """Identifier of the application that posted the notification."""

    extras: dict[str, Any] = Field(default_factory=dict)
    """Notification extras (``android.title``, ``android.text``, ...)."""

    posted_at: datetime = Field(default_factory=utcnow)

    @field_validator("package", mode="before")
    @classmethod
    def _coerce_package(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("extras", mode="before")
    @classmethod
    def _coerce_extras(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value


class RawGuidance(RelayBaseModel):
    """Guidance text fields of a single source notification.

    The navigation app puts the distance to the next maneuver in the
    title (e.g. ``"200 m"``), the maneuver description in the text and
    the remaining time/distance in the sub text (e.g. ``"3 min · 240 m"``).
    """

    distance_text: OptionalText = Field(
        default=None,
        validation_alias=AliasChoices(EXTRA_TITLE, "distance_text", "distanceText"),
    )
    maneuver_text: OptionalText = Field(
        default=None,
        validation_alias=AliasChoices(EXTRA_TEXT, "maneuver_text", "maneuverText"),
    )
    sub_text: OptionalText = Field(
        default=None,
        validation_alias=AliasChoices(EXTRA_SUB_TEXT, "sub_text", "subText"),
    )

    @classmethod
    def from_extras(cls, extras: Mapping[str, Any]) -> RawGuidance:
        """Build guidance from notification extras, ignoring unrelated keys."""
        return cls.model_validate(dict(extras))
