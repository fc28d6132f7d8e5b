"""Source-notification intake.

Filters posted notifications down to the configured navigation app and
extracts its guidance fields. Notifications from any other package are
discarded without error.
"""

from __future__ import annotations

import logging

from mapsrelay.models.guidance import PostedNotification, RawGuidance

_logger = logging.getLogger(__name__)


def is_from_source(notification: PostedNotification, source_package: str) -> bool:
    """Exact identifier match; no wildcards or allow-lists."""
    return notification.package == source_package


def extract_guidance(notification: PostedNotification, source_package: str) -> RawGuidance | None:
    """Return guidance for notifications posted by *source_package*, else ``None``."""
    if not is_from_source(notification, source_package):
        return None
    guidance = RawGuidance.from_extras(notification.extras)
    _logger.debug(
        "Maps notification captured distance=%r text=%r sub=%r",
        guidance.distance_text,
        guidance.maneuver_text,
        guidance.sub_text,
    )
    return guidance
