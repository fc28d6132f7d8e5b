"""Data models for mapsrelay."""

from mapsrelay.models._base import OptionalText, RelayBaseModel, coerce_text
from mapsrelay.models.guidance import PostedNotification, RawGuidance
from mapsrelay.models.navigation import NavigationEvent
from mapsrelay.models.notification import RelayNotification
from mapsrelay.models.symbols import DirectionSymbol

__all__ = [
    "DirectionSymbol",
    "NavigationEvent",
    "OptionalText",
    "PostedNotification",
    "RawGuidance",
    "RelayBaseModel",
    "RelayNotification",
    "coerce_text",
]
