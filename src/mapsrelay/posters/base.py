"""Notification poster interface and the default logging poster."""

from __future__ import annotations

import logging
from typing import Protocol

from mapsrelay.models.notification import RelayNotification

_logger = logging.getLogger(__name__)


class NotificationPoster(Protocol):
    """Delivers a re-announced notification to the single relay target.

    Implementations raise :class:`~mapsrelay.exceptions.MapsRelayTransportError`
    on delivery failure; the display sink logs it and moves on.
    """

    async def post(self, notification: RelayNotification) -> None:
        ...

    async def close(self) -> None:
        ...


class LoggingPoster:
    """Poster that only logs; used when no relay target is configured."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger
        self.last_posted: RelayNotification | None = None

    async def post(self, notification: RelayNotification) -> None:
        self.last_posted = notification
        self._logger.info("Relay notification title=%s body=%s", notification.title, notification.body)

    async def close(self) -> None:
        return None
