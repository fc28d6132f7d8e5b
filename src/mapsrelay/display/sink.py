"""Display sink consuming the relay bus."""

from __future__ import annotations

import logging
from collections.abc import Callable

from mapsrelay._constants import CHANNEL_ID, NOTIFICATION_TIMEOUT_SECONDS
from mapsrelay.display.log import ActivityLog
from mapsrelay.display.render import build_notification, compose_text, format_log_entry
from mapsrelay.exceptions import MapsRelayTransportError
from mapsrelay.models.navigation import NavigationEvent
from mapsrelay.models.notification import RelayNotification
from mapsrelay.posters.base import NotificationPoster
from mapsrelay.relay.bus import RelaySubscription

_logger = logging.getLogger(__name__)


def _always() -> bool:
    return True


class DisplaySink:
    """Re-announces relayed events and appends them to the activity log.

    The notification is only posted while ``can_post()`` reports the
    post-notifications permission; the log line is written regardless.
    """

    def __init__(
        self,
        poster: NotificationPoster,
        log: ActivityLog,
        *,
        can_post: Callable[[], bool] = _always,
        channel_id: str = CHANNEL_ID,
        timeout_seconds: float = NOTIFICATION_TIMEOUT_SECONDS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._poster = poster
        self._log = log
        self._can_post = can_post
        self._channel_id = channel_id
        self._timeout_seconds = timeout_seconds
        self._logger = logger or _logger

    async def handle(self, event: NavigationEvent) -> RelayNotification:
        notification = build_notification(
            event,
            channel_id=self._channel_id,
            timeout_seconds=self._timeout_seconds,
        )
        if self._can_post():
            try:
                await self._poster.post(notification)
            except MapsRelayTransportError as exc:
                self._logger.warning("Relay notification not delivered: %s", exc)
            except Exception:
                self._logger.warning("Relay notification poster failed", exc_info=True)
        else:
            self._logger.debug("Posting notifications not allowed; logging only")

        self._log.append(format_log_entry(notification.title, compose_text(event), event.timestamp.astimezone()))
        return notification

    async def run(self, subscription: RelaySubscription) -> None:
        """Consume *subscription* until it is closed."""
        async for event in subscription:
            await self.handle(event)
        self._logger.debug("Display sink stopped")
