"""Notification re-announced to the relay target."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from mapsrelay._constants import CHANNEL_ID, NOTIFICATION_ID, NOTIFICATION_TIMEOUT_SECONDS
from mapsrelay.models._base import RelayBaseModel, utcnow


class RelayNotification(RelayBaseModel):
    """High-priority, self-dismissing notification built from a navigation event.

    Every relayed notification reuses the same ``notification_id`` so the
    target replaces the previous guidance instead of stacking it.
    """

    title: str
    body: str
    channel_id: str = CHANNEL_ID
    notification_id: int = NOTIFICATION_ID
    high_priority: bool = True
    auto_cancel: bool = True
    timeout_seconds: float = NOTIFICATION_TIMEOUT_SECONDS
    posted_at: datetime = Field(default_factory=utcnow)
