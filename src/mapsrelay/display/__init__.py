"""Display layer: notification re-announcement, activity log and status text."""

from mapsrelay.display.log import ActivityLog
from mapsrelay.display.render import (
    StatusView,
    build_notification,
    compose_text,
    compose_title,
    format_log_entry,
    status_view,
)
from mapsrelay.display.sink import DisplaySink

__all__ = [
    "ActivityLog",
    "DisplaySink",
    "StatusView",
    "build_notification",
    "compose_text",
    "compose_title",
    "format_log_entry",
    "status_view",
]
