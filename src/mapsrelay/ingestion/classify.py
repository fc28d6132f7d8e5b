"""Maneuver classification.

Maps the free-text maneuver description of a navigation notification to a
:class:`DirectionSymbol`.

Matching is a case-insensitive *substring* test against an ordered rule
table; the first rule with any matching pattern wins. The order is part of
the observable behaviour and must be kept as is, including its quirks:

- the slight-right/slight-left rules can never fire because the plain
  right/left rules already capture ``"right"``/``"left"``;
- the bare ``"u"`` pattern of the U-turn rule matches inside ordinary words
  such as ``"continue"``, and inside both roundabout patterns, so the
  roundabout rule never fires either.
"""

from __future__ import annotations

from dataclasses import dataclass

from mapsrelay.models.symbols import DirectionSymbol


@dataclass(frozen=True)
class ManeuverRule:
    symbol: DirectionSymbol
    patterns: tuple[str, ...]
    prefixes: tuple[str, ...] = ()

    def matches(self, lowered: str) -> bool:
        if any(pattern in lowered for pattern in self.patterns):
            return True
        return any(lowered.startswith(prefix) for prefix in self.prefixes)


MANEUVER_RULES: tuple[ManeuverRule, ...] = (
    ManeuverRule(DirectionSymbol.RIGHT, ("turn right", "exit right", "right")),
    ManeuverRule(DirectionSymbol.LEFT, ("turn left", "exit left", "left")),
    ManeuverRule(DirectionSymbol.SLIGHT_RIGHT, ("keep right", "right")),
    ManeuverRule(DirectionSymbol.SLIGHT_LEFT, ("keep left", "left")),
    ManeuverRule(DirectionSymbol.U_TURN, ("make a u-turn", "u")),
    ManeuverRule(DirectionSymbol.ROUNDABOUT, ("roundabout", "round")),
    # "Head north", "Head west", ... are straight-ahead starts.
    ManeuverRule(DirectionSymbol.STRAIGHT, ("continue straight", "go straight", "straight"), prefixes=("head",)),
    ManeuverRule(DirectionSymbol.DESTINATION, ("destination",)),
)


def classify(maneuver_text: str | None) -> DirectionSymbol:
    """Classify *maneuver_text*; absent, empty or unmatched text is ``UNKNOWN``."""
    if not maneuver_text:
        return DirectionSymbol.UNKNOWN
    lowered = maneuver_text.lower()
    for rule in MANEUVER_RULES:
        if rule.matches(lowered):
            return rule.symbol
    return DirectionSymbol.UNKNOWN
