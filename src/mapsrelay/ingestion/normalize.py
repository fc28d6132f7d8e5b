"""Navigation event normalization.

Turns :class:`RawGuidance` into a :class:`NavigationEvent`, carrying the
last known distance forward when a notification omits it. The carry-forward
value is the only long-lived mutable state of the pipeline and is owned by
:class:`EventNormalizer`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime

from mapsrelay._constants import INITIAL_DISTANCE
from mapsrelay.ingestion.classify import classify
from mapsrelay.models._base import utcnow
from mapsrelay.models.guidance import RawGuidance
from mapsrelay.models.navigation import NavigationEvent

_logger = logging.getLogger(__name__)


def carry_forward(previous: str, incoming: str | None) -> str:
    """Return *incoming* when it carries a value, otherwise *previous*."""
    if incoming:
        return incoming
    return previous


def normalize_guidance(
    prev_distance: str,
    raw: RawGuidance,
    *,
    timestamp: datetime,
) -> tuple[NavigationEvent, str]:
    """Build an event from *raw* and return it with the updated distance.

    The caller owns the carry-forward value and must pass the returned
    distance back in on the next call.
    """
    distance = carry_forward(prev_distance, raw.distance_text)
    event = NavigationEvent(
        symbol=classify(raw.maneuver_text),
        distance=distance,
        maneuver_text=raw.maneuver_text or "",
        time_dist_info=raw.sub_text,
        timestamp=timestamp,
    )
    return event, distance


class EventNormalizer:
    """Stateful normalizer holding the carry-forward distance.

    ``normalize`` is safe to call from several producer threads: the
    read-modify-write of the distance and the timestamp clamp happen under
    one lock, so events are numbered in arrival order.
    """

    def __init__(
        self,
        *,
        initial_distance: str = INITIAL_DISTANCE,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._initial_distance = initial_distance
        self._clock = clock
        self._lock = threading.Lock()
        self._distance = initial_distance
        self._last_timestamp: datetime | None = None

    @property
    def distance(self) -> str:
        """Current carry-forward distance."""
        with self._lock:
            return self._distance

    def reset(self) -> None:
        """Forget the carried distance (e.g. when a new route starts)."""
        with self._lock:
            self._distance = self._initial_distance
            self._last_timestamp = None

    def normalize(self, raw: RawGuidance) -> NavigationEvent:
        with self._lock:
            now = self._clock()
            if now.tzinfo is None:
                now = now.replace(tzinfo=UTC)
            # Wall clocks can step backwards; events must not.
            if self._last_timestamp is not None and now < self._last_timestamp:
                now = self._last_timestamp
            event, self._distance = normalize_guidance(self._distance, raw, timestamp=now)
            self._last_timestamp = event.timestamp

        _logger.debug(
            "Guidance normalized symbol=%s distance=%s info=%s",
            event.symbol,
            event.distance,
            event.time_dist_info,
        )
        return event
