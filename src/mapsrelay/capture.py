"""Capture controller: source notification -> normalized event -> relay bus."""

from __future__ import annotations

import logging

from mapsrelay._constants import GOOGLE_MAPS_PACKAGE
from mapsrelay.ingestion.normalize import EventNormalizer
from mapsrelay.ingestion.notification import extract_guidance
from mapsrelay.models.guidance import PostedNotification
from mapsrelay.models.navigation import NavigationEvent
from mapsrelay.relay.bus import RelayBus
from mapsrelay.sources.base import NotificationSource

_logger = logging.getLogger(__name__)


class NotificationCapture:
    """Binds a notification source to the normalizer and the relay bus.

    Implements the start/stop hooks driven by the monitoring state machine.
    """

    def __init__(
        self,
        source: NotificationSource,
        normalizer: EventNormalizer,
        bus: RelayBus,
        *,
        source_package: str = GOOGLE_MAPS_PACKAGE,
    ) -> None:
        self._source = source
        self._normalizer = normalizer
        self._bus = bus
        self._source_package = source_package

    @property
    def is_running(self) -> bool:
        return self._source.is_running

    def start(self) -> None:
        self._source.start(self.on_posted)

    def stop(self) -> None:
        self._source.stop()

    def on_posted(self, notification: PostedNotification) -> NavigationEvent | None:
        """Relay *notification* if it comes from the navigation app."""
        guidance = extract_guidance(notification, self._source_package)
        if guidance is None:
            return None
        event = self._normalizer.normalize(guidance)
        self._bus.publish(event)
        return event
