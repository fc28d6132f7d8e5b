"""Relay bus between the capture context and the display sink.

Publishing never blocks: the event is posted onto the subscriber's asyncio
loop with ``call_soon_threadsafe`` (so the producer may be any thread, e.g.
the MQTT network thread), or dropped when nobody is subscribed. Guidance is
ephemeral, so there is no buffering and no replay for late subscribers.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Final

from mapsrelay.models.navigation import NavigationEvent

_logger = logging.getLogger(__name__)

_CLOSED: Final = object()


class RelaySubscription:
    """Handle for the single active consumer of a :class:`RelayBus`.

    Usage::

        subscription = bus.subscribe()
        async for event in subscription:
            ...
    """

    def __init__(self, bus: RelayBus, loop: asyncio.AbstractEventLoop) -> None:
        self._bus = bus
        self._loop = loop
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _post(self, item: object) -> bool:
        try:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, item)
        except RuntimeError:
            # Loop already closed; nothing can consume the item any more.
            return False
        return True

    def _deliver(self, event: NavigationEvent) -> bool:
        if self._closed:
            return False
        return self._post(event)

    def close(self) -> None:
        """Detach from the bus and end iteration once queued events drain."""
        if self._closed:
            return
        self._closed = True
        self._bus._detach(self)
        self._post(_CLOSED)

    async def get(self) -> NavigationEvent | None:
        """Wait for the next event; ``None`` once the subscription is closed."""
        item = await self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            return None
        assert isinstance(item, NavigationEvent)  # noqa: S101
        return item

    def __aiter__(self) -> RelaySubscription:
        return self

    async def __anext__(self) -> NavigationEvent:
        event = await self.get()
        if event is None:
            raise StopAsyncIteration
        return event


class RelayBus:
    """One-directional, FIFO, at-most-one-subscriber event bus."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger
        self._lock = threading.Lock()
        self._subscription: RelaySubscription | None = None
        self._dropped = 0

    @property
    def has_subscriber(self) -> bool:
        with self._lock:
            return self._subscription is not None

    @property
    def dropped_count(self) -> int:
        """Events dropped because no subscriber could receive them."""
        with self._lock:
            return self._dropped

    def subscribe(self, loop: asyncio.AbstractEventLoop | None = None) -> RelaySubscription:
        """Attach a consumer on *loop* (default: the running loop).

        A new subscription replaces the current one, which is closed.
        """
        target_loop = loop or asyncio.get_running_loop()
        subscription = RelaySubscription(self, target_loop)
        with self._lock:
            previous = self._subscription
            self._subscription = subscription
        if previous is not None:
            self._logger.debug("Relay subscriber replaced")
            previous.close()
        return subscription

    def publish(self, event: NavigationEvent) -> bool:
        """Hand *event* to the subscriber; returns ``False`` if it was dropped."""
        with self._lock:
            subscription = self._subscription
        if subscription is not None and subscription._deliver(event):
            return True
        with self._lock:
            self._dropped += 1
        self._logger.debug("Relay event dropped (no subscriber) symbol=%s", event.symbol)
        return False

    def _detach(self, subscription: RelaySubscription) -> None:
        with self._lock:
            if self._subscription is subscription:
                self._subscription = None
