"""Permission flags reported by the platform."""

from __future__ import annotations

from mapsrelay.models._base import RelayBaseModel


class PermissionState(RelayBaseModel):
    """Snapshot of the two permissions the relay depends on."""

    listener_access: bool = False
    """Notification-listener access; gates the monitoring state machine."""

    post_notifications: bool = False
    """Whether the relay may post its own notifications."""
