"""Notification source interface and the in-process source."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from mapsrelay.models.guidance import PostedNotification

OnPosted = Callable[[PostedNotification], None]


class NotificationSource(Protocol):
    """Push interface of the platform's notification observation.

    Sources deliver posted notifications serially: ``on_posted`` is never
    invoked concurrently with itself by the same source.
    """

    @property
    def is_running(self) -> bool:
        ...

    def start(self, on_posted: OnPosted) -> None:
        ...

    def stop(self) -> None:
        ...


class InMemoryNotificationSource:
    """Source fed by the embedding application via :meth:`post`.

    Notifications posted while the source is stopped are ignored, matching
    a platform listener that is not bound.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._on_posted: OnPosted | None = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._on_posted is not None

    def start(self, on_posted: OnPosted) -> None:
        self._on_posted = on_posted
        self._logger.info("Notification listener connected")

    def stop(self) -> None:
        if self._on_posted is None:
            return
        self._on_posted = None
        self._logger.info("Notification listener disconnected")

    def post(self, package: str, extras: Mapping[str, Any] | None = None) -> bool:
        """Deliver a posted notification; returns ``False`` while stopped."""
        with self._lock:
            callback = self._on_posted
            if callback is None:
                return False
            callback(PostedNotification(package=package, extras=dict(extras or {})))
        return True
