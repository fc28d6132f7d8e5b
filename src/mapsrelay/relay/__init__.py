"""Relay layer: hands normalized events from capture to display."""

from mapsrelay.relay.bus import RelayBus, RelaySubscription

__all__ = ["RelayBus", "RelaySubscription"]
