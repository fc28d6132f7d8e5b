"""Direction symbols assigned to classified maneuvers."""

from __future__ import annotations

from enum import StrEnum


class DirectionSymbol(StrEnum):
    """Closed set of maneuver categories.

    Each member renders as an emoji marker via :attr:`marker`.
    ``UNKNOWN`` covers both "no maneuver text" and "text matched no rule".
    """

    RIGHT = "right"
    LEFT = "left"
    SLIGHT_RIGHT = "slight_right"
    SLIGHT_LEFT = "slight_left"
    U_TURN = "u_turn"
    ROUNDABOUT = "roundabout"
    STRAIGHT = "straight"
    DESTINATION = "destination"
    UNKNOWN = "unknown"

    @property
    def marker(self) -> str:
        """Emoji marker shown in relayed notifications."""
        return _MARKERS[self]


_MARKERS: dict[DirectionSymbol, str] = {
    DirectionSymbol.RIGHT: "➡️",
    DirectionSymbol.LEFT: "⬅️",
    DirectionSymbol.SLIGHT_RIGHT: "↗️",
    DirectionSymbol.SLIGHT_LEFT: "↖️",
    DirectionSymbol.U_TURN: "↩️",
    DirectionSymbol.ROUNDABOUT: "🔄",
    DirectionSymbol.STRAIGHT: "⬆️",
    DirectionSymbol.DESTINATION: "🏁",
    DirectionSymbol.UNKNOWN: "📍",
}
