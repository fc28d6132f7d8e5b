from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta

from mapsrelay.ingestion.normalize import EventNormalizer, carry_forward, normalize_guidance
from mapsrelay.ingestion.notification import extract_guidance
from mapsrelay.models.guidance import PostedNotification, RawGuidance
from mapsrelay.models.symbols import DirectionSymbol

MAPS = "com.google.android.apps.maps"


def _dt() -> datetime:
    return datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


def test_distance_carries_forward_across_missing_values() -> None:
    normalizer = EventNormalizer(clock=_dt)
    distances = ["50 m", None, "10 m", None]

    events = [normalizer.normalize(RawGuidance(distance_text=d, maneuver_text="Turn right")) for d in distances]

    assert [e.distance for e in events] == ["50 m", "50 m", "10 m", "10 m"]


def test_initial_distance_used_until_first_value() -> None:
    normalizer = EventNormalizer(clock=_dt)

    event = normalizer.normalize(RawGuidance(maneuver_text="Head east"))

    assert event.distance == "0 m"
    assert normalizer.distance == "0 m"


def test_empty_distance_does_not_overwrite() -> None:
    normalizer = EventNormalizer(initial_distance="1 km", clock=_dt)
    normalizer.normalize(RawGuidance(distance_text="300 m"))

    event = normalizer.normalize(RawGuidance(distance_text=""))

    assert event.distance == "300 m"


def test_reset_restores_initial_distance() -> None:
    normalizer = EventNormalizer(clock=_dt)
    normalizer.normalize(RawGuidance(distance_text="300 m"))

    normalizer.reset()

    assert normalizer.distance == "0 m"


def test_normalize_guidance_is_pure() -> None:
    raw = RawGuidance(distance_text=None, maneuver_text=None, sub_text="3 min · 240 m")

    event, distance = normalize_guidance("120 m", raw, timestamp=_dt())

    assert distance == "120 m"
    assert event.distance == "120 m"
    assert event.symbol == DirectionSymbol.UNKNOWN
    assert event.maneuver_text == ""
    assert event.time_dist_info == "3 min · 240 m"
    assert event.timestamp == _dt()


def test_carry_forward_helper() -> None:
    assert carry_forward("5 m", None) == "5 m"
    assert carry_forward("5 m", "") == "5 m"
    assert carry_forward("5 m", "7 m") == "7 m"


def test_timestamps_never_decrease_when_clock_steps_back() -> None:
    ticks = iter([_dt(), _dt() - timedelta(seconds=30), _dt() + timedelta(seconds=5)])
    normalizer = EventNormalizer(clock=lambda: next(ticks))

    stamps = [normalizer.normalize(RawGuidance()).timestamp for _ in range(3)]

    assert stamps == [_dt(), _dt(), _dt() + timedelta(seconds=5)]


def test_naive_clock_values_become_utc() -> None:
    normalizer = EventNormalizer(clock=lambda: datetime(2026, 1, 1, 8, 0, 0))

    event = normalizer.normalize(RawGuidance())

    assert event.timestamp.utcoffset() == timedelta(0)


def test_concurrent_producers_keep_last_written_distance() -> None:
    normalizer = EventNormalizer(clock=_dt)
    seen: list[str] = []
    lock = threading.Lock()

    def produce(value: str) -> None:
        for _ in range(200):
            event = normalizer.normalize(RawGuidance(distance_text=value))
            with lock:
                seen.append(event.distance)

    threads = [threading.Thread(target=produce, args=(f"{i} m",)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 800
    assert normalizer.distance in {"0 m", "1 m", "2 m", "3 m"}


def test_raw_guidance_from_extras() -> None:
    guidance = RawGuidance.from_extras(
        {
            "android.title": "200 ft",
            "android.text": "Turn left onto Elm St",
            "android.subText": "1 min · 200 ft",
            "android.progress": 3,
        }
    )

    assert guidance.distance_text == "200 ft"
    assert guidance.maneuver_text == "Turn left onto Elm St"
    assert guidance.sub_text == "1 min · 200 ft"


def test_raw_guidance_coerces_non_string_extras() -> None:
    guidance = RawGuidance.from_extras({"android.title": 250, "android.text": None})

    assert guidance.distance_text == "250"
    assert guidance.maneuver_text is None
    assert guidance.sub_text is None


def test_extract_guidance_ignores_other_packages() -> None:
    other = PostedNotification(package="com.waze", extras={"android.text": "Turn left"})
    similar = PostedNotification(package="com.google.android.apps.maps.beta", extras={})

    assert extract_guidance(other, MAPS) is None
    assert extract_guidance(similar, MAPS) is None


def test_extract_guidance_requires_exact_package() -> None:
    padded = PostedNotification(package=f" {MAPS}\n", extras={"android.text": "Turn left"})

    assert padded.package == f" {MAPS}\n"
    assert extract_guidance(padded, MAPS) is None


def test_extract_guidance_from_source() -> None:
    posted = PostedNotification.model_validate(
        {"packageName": MAPS, "extras": {"android.title": "50 m", "android.text": "Turn right"}}
    )

    guidance = extract_guidance(posted, MAPS)

    assert guidance is not None
    assert guidance.distance_text == "50 m"
    assert guidance.maneuver_text == "Turn right"
