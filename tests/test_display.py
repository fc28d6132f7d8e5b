from __future__ import annotations

from datetime import UTC, datetime

import pytest

from mapsrelay.display.log import ActivityLog
from mapsrelay.display.render import (
    build_notification,
    compose_text,
    compose_title,
    format_log_entry,
    status_view,
)
from mapsrelay.display.sink import DisplaySink
from mapsrelay.exceptions import MapsRelayTransportError
from mapsrelay.models.navigation import NavigationEvent
from mapsrelay.models.notification import RelayNotification
from mapsrelay.models.symbols import DirectionSymbol
from mapsrelay.state.monitoring import MonitoringState


class _RecordingPoster:
    def __init__(self) -> None:
        self.posted: list[RelayNotification] = []

    async def post(self, notification: RelayNotification) -> None:
        self.posted.append(notification)

    async def close(self) -> None:
        return None


class _FailingPoster(_RecordingPoster):
    async def post(self, notification: RelayNotification) -> None:
        raise MapsRelayTransportError("HTTP 503 from webhook", status_code=503)


class _BrokenPoster(_RecordingPoster):
    async def post(self, notification: RelayNotification) -> None:
        raise RuntimeError("poster bug")


def _event(**overrides: object) -> NavigationEvent:
    values: dict[str, object] = {
        "symbol": DirectionSymbol.LEFT,
        "distance": "200 ft",
        "maneuver_text": "Turn left onto Elm St",
        "time_dist_info": "1 min · 200 ft",
        "timestamp": datetime(2026, 1, 1, 9, 30, 5, tzinfo=UTC),
    }
    values.update(overrides)
    return NavigationEvent.model_validate(values)


def test_title_combines_marker_distance_and_text() -> None:
    assert compose_title(_event()) == "(⬅️)200 ft . Turn left onto Elm St"


def test_notification_body_and_flags() -> None:
    notification = build_notification(_event(), timeout_seconds=60.0)

    assert notification.body == "1 min · 200 ft - 🗺️"
    assert notification.high_priority is True
    assert notification.auto_cancel is True
    assert notification.timeout_seconds == 60.0
    assert notification.channel_id == "maps_notify_channel"
    assert notification.notification_id == 1001


def test_notification_body_defaults_without_sub_text() -> None:
    notification = build_notification(_event(time_dist_info=None))

    assert notification.body == "Navigation update - 🗺️"


def test_empty_sub_text_is_kept() -> None:
    assert compose_text(_event(time_dist_info="")) == ""
    assert build_notification(_event(time_dist_info="")).body == " - 🗺️"


def test_log_entry_format() -> None:
    entry = format_log_entry("(➡️)50 m . Turn right", "2 min · 1 km", datetime(2026, 1, 1, 7, 4, 9))

    assert entry == "[07:04:09] 📱⌚\n📍 (➡️)50 m . Turn right\n💬 2 min · 1 km\n\n"


def test_status_view_per_state() -> None:
    assert status_view(MonitoringState.DISABLED).status_text == "❌ Permission Required"
    assert status_view(MonitoringState.READY).button_text == "▶️ Start Monitoring"
    assert status_view(MonitoringState.ACTIVE).status_text == "✅ Active - Relaying to Watch"


def test_activity_log_is_bounded_and_tracks_writes() -> None:
    log = ActivityLog(max_entries=2)
    for entry in ("a", "b", "c"):
        log.append(entry)

    assert log.entries == ["b", "c"]
    assert log.written == 3
    assert log.since(1) == ["b", "c"]
    assert log.since(3) == []

    log.reset("start")
    assert log.text == "start"


@pytest.mark.asyncio
async def test_sink_posts_and_logs() -> None:
    poster = _RecordingPoster()
    log = ActivityLog()
    sink = DisplaySink(poster, log)

    notification = await sink.handle(_event())

    assert poster.posted == [notification]
    assert len(log) == 1
    assert "📍 (⬅️)200 ft . Turn left onto Elm St\n💬 1 min · 200 ft\n\n" in log.text


@pytest.mark.asyncio
async def test_sink_only_logs_when_posting_not_allowed() -> None:
    poster = _RecordingPoster()
    log = ActivityLog()
    sink = DisplaySink(poster, log, can_post=lambda: False)

    await sink.handle(_event())

    assert poster.posted == []
    assert len(log) == 1


@pytest.mark.asyncio
async def test_sink_survives_delivery_failure() -> None:
    log = ActivityLog()
    sink = DisplaySink(_FailingPoster(), log)

    await sink.handle(_event())
    await sink.handle(_event(distance="100 ft"))

    assert len(log) == 2


@pytest.mark.asyncio
async def test_sink_survives_unexpected_poster_error() -> None:
    log = ActivityLog()
    sink = DisplaySink(_BrokenPoster(), log)

    await sink.handle(_event())
    await sink.handle(_event(distance="100 ft"))

    assert len(log) == 2
    assert "📍 (⬅️)100 ft . Turn left onto Elm St" in log.entries[-1]
