"""Ingestion layer.

Adapters that turn posted source notifications into classified,
normalized navigation events.
"""

from mapsrelay.ingestion.classify import MANEUVER_RULES, ManeuverRule, classify
from mapsrelay.ingestion.normalize import EventNormalizer, carry_forward, normalize_guidance
from mapsrelay.ingestion.notification import extract_guidance, is_from_source

__all__ = [
    "MANEUVER_RULES",
    "EventNormalizer",
    "ManeuverRule",
    "carry_forward",
    "classify",
    "extract_guidance",
    "is_from_source",
    "normalize_guidance",
]
