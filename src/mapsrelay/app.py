"""High-level relay wiring source, pipeline, monitoring and display."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from mapsrelay.capture import NotificationCapture
from mapsrelay.config import RelayConfig
from mapsrelay.display.log import ActivityLog
from mapsrelay.display.render import (
    MONITORING_STARTED_TEXT,
    MONITORING_STOPPED_TEXT,
    POST_PERMISSION_DENIED_TEXT,
    POST_PERMISSION_GRANTED_TEXT,
    StatusView,
    status_view,
)
from mapsrelay.display.sink import DisplaySink
from mapsrelay.exceptions import MapsRelayStateError
from mapsrelay.ingestion.normalize import EventNormalizer
from mapsrelay.models._base import utcnow
from mapsrelay.posters.base import LoggingPoster, NotificationPoster
from mapsrelay.posters.webhook import WebhookPoster
from mapsrelay.relay.bus import RelayBus, RelaySubscription
from mapsrelay.sources.base import InMemoryNotificationSource, NotificationSource
from mapsrelay.sources.mqtt import MqttNotificationSource, MqttSourceSettings
from mapsrelay.state.monitoring import MonitoringState, MonitoringStateMachine
from mapsrelay.state.permissions import PermissionState

_logger = logging.getLogger(__name__)


def _default_source(config: RelayConfig) -> NotificationSource:
    if config.mqtt_host:
        return MqttNotificationSource(MqttSourceSettings.from_config(config), logger=_logger)
    return InMemoryNotificationSource(logger=_logger)


def _default_poster(config: RelayConfig) -> NotificationPoster:
    if config.webhook_url:
        return WebhookPoster(config.webhook_url)
    return LoggingPoster(logger=_logger)


class MapsRelay:
    """Relay navigation notifications to a display sink.

    Usage::

        async with MapsRelay(config, permissions=PermissionState(listener_access=True)) as relay:
            relay.toggle()  # start monitoring
            ...
    """

    def __init__(
        self,
        config: RelayConfig | None = None,
        *,
        source: NotificationSource | None = None,
        poster: NotificationPoster | None = None,
        permissions: PermissionState | None = None,
        on_permission_request: Callable[[], None] | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config or RelayConfig()
        self._source = source or _default_source(self._config)
        self._poster = poster or _default_poster(self._config)
        self._permissions = permissions or PermissionState()

        self._bus = RelayBus(logger=_logger)
        self._normalizer = EventNormalizer(initial_distance=self._config.initial_distance, clock=clock)
        self._capture = NotificationCapture(
            self._source,
            self._normalizer,
            self._bus,
            source_package=self._config.source_package,
        )
        self._log = ActivityLog(self._config.log_max_entries)
        self._sink = DisplaySink(
            self._poster,
            self._log,
            can_post=lambda: self._permissions.post_notifications,
            channel_id=self._config.channel_id,
            timeout_seconds=self._config.notification_timeout,
        )
        self._monitoring = MonitoringStateMachine(
            self._capture,
            permission_granted=self._permissions.listener_access,
            on_permission_request=on_permission_request,
            on_change=self._on_monitoring_change,
        )
        self._subscription: RelaySubscription | None = None
        self._sink_task: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> MapsRelay:
        self._subscription = self._bus.subscribe()
        self._sink_task = asyncio.create_task(self._sink.run(self._subscription), name="mapsrelay-display")
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._monitoring.is_active:
            self._monitoring.toggle()
        else:
            self._capture.stop()

        subscription = self._subscription
        task = self._sink_task
        self._subscription = None
        self._sink_task = None
        if subscription is not None:
            subscription.close()
        try:
            if task is not None:
                await task
        finally:
            await self._poster.close()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> RelayConfig:
        return self._config

    @property
    def source(self) -> NotificationSource:
        return self._source

    @property
    def bus(self) -> RelayBus:
        return self._bus

    @property
    def log(self) -> ActivityLog:
        return self._log

    @property
    def permissions(self) -> PermissionState:
        return self._permissions

    @property
    def state(self) -> MonitoringState:
        return self._monitoring.current_state

    @property
    def status(self) -> StatusView:
        return status_view(self._monitoring.current_state)

    @property
    def distance(self) -> str:
        """Current carry-forward distance."""
        return self._normalizer.distance

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle(self) -> MonitoringState:
        """Start or stop monitoring; requests permission while disabled."""
        if self._subscription is None:
            raise MapsRelayStateError("Relay not running. Use 'async with MapsRelay(...) as relay:'")
        return self._monitoring.toggle()

    def update_permissions(
        self,
        *,
        listener_access: bool | None = None,
        post_notifications: bool | None = None,
    ) -> PermissionState:
        """Feed polled or requested permission results into the relay."""
        current = self._permissions
        updated = current.model_copy(
            update={
                "listener_access": current.listener_access if listener_access is None else listener_access,
                "post_notifications": current.post_notifications if post_notifications is None else post_notifications,
            }
        )
        self._permissions = updated

        if post_notifications is not None:
            self._log.append(POST_PERMISSION_GRANTED_TEXT if post_notifications else POST_PERMISSION_DENIED_TEXT)
        if listener_access is not None:
            self._monitoring.update_permission(listener_access)
        return updated

    def _on_monitoring_change(self, old: MonitoringState, new: MonitoringState) -> None:
        if new == MonitoringState.ACTIVE:
            self._log.reset(MONITORING_STARTED_TEXT)
        elif old == MonitoringState.ACTIVE:
            self._log.append(MONITORING_STOPPED_TEXT)
