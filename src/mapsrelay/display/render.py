"""Presentation of relayed events and monitoring status."""

from __future__ import annotations

import dataclasses
from datetime import datetime

from mapsrelay._constants import (
    BODY_MARKER,
    CHANNEL_ID,
    DEFAULT_BODY,
    LOG_MARKER,
    NOTIFICATION_TIMEOUT_SECONDS,
)
from mapsrelay.models.navigation import NavigationEvent
from mapsrelay.models.notification import RelayNotification
from mapsrelay.state.monitoring import MonitoringState

MONITORING_STARTED_TEXT = "🚀 Monitoring started...\nWaiting for Google Maps notifications...\n\n"
MONITORING_STOPPED_TEXT = "\n⏹️ Monitoring stopped.\n"
POST_PERMISSION_GRANTED_TEXT = "Permission is granted. You can now post notifications."
POST_PERMISSION_DENIED_TEXT = "notification permission denied!"


def compose_title(event: NavigationEvent) -> str:
    """``(<marker>)<distance> . <maneuver text>``, e.g. ``(⬅️)200 ft . Turn left``."""
    return f"({event.symbol.marker}){event.distance} . {event.maneuver_text}"


def compose_text(event: NavigationEvent) -> str:
    if event.time_dist_info is None:
        return DEFAULT_BODY
    return event.time_dist_info


def build_notification(
    event: NavigationEvent,
    *,
    channel_id: str = CHANNEL_ID,
    timeout_seconds: float = NOTIFICATION_TIMEOUT_SECONDS,
) -> RelayNotification:
    return RelayNotification(
        title=compose_title(event),
        body=f"{compose_text(event)} - {BODY_MARKER}",
        channel_id=channel_id,
        timeout_seconds=timeout_seconds,
    )


def format_log_entry(title: str, text: str, at: datetime) -> str:
    """One on-screen log entry, time-stamped as ``HH:MM:SS`` in *at*'s zone."""
    return f"[{at:%H:%M:%S}] {LOG_MARKER}\n📍 {title}\n💬 {text}\n\n"


@dataclasses.dataclass(frozen=True)
class StatusView:
    """What the UI shows for a monitoring state."""

    button_text: str
    status_text: str
    color: str


_STATUS_VIEWS: dict[MonitoringState, StatusView] = {
    MonitoringState.DISABLED: StatusView("🔓 Enable Notification Access", "❌ Permission Required", "red"),
    MonitoringState.ACTIVE: StatusView("⏹️ Stop Monitoring", "✅ Active - Relaying to Watch", "green"),
    MonitoringState.READY: StatusView("▶️ Start Monitoring", "⏸️ Ready to Start", "gray"),
}


def status_view(state: MonitoringState) -> StatusView:
    return _STATUS_VIEWS[state]
