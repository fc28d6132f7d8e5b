"""mapsrelay - Relay turn-by-turn guidance from navigation notifications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mapsrelay")
except PackageNotFoundError:
    __version__ = "0+local"
from mapsrelay.app import MapsRelay
from mapsrelay.capture import NotificationCapture
from mapsrelay.config import RelayConfig
from mapsrelay.exceptions import (
    MapsRelayConfigError,
    MapsRelayError,
    MapsRelayStateError,
    MapsRelayTransportError,
)
from mapsrelay.ingestion import EventNormalizer, classify, normalize_guidance
from mapsrelay.models import (
    DirectionSymbol,
    NavigationEvent,
    PostedNotification,
    RawGuidance,
    RelayNotification,
)
from mapsrelay.relay import RelayBus, RelaySubscription
from mapsrelay.state import MonitoringState, MonitoringStateMachine, PermissionState

__all__ = [
    "__version__",
    "DirectionSymbol",
    "EventNormalizer",
    "MapsRelay",
    "MapsRelayConfigError",
    "MapsRelayError",
    "MapsRelayStateError",
    "MapsRelayTransportError",
    "MonitoringState",
    "MonitoringStateMachine",
    "NavigationEvent",
    "NotificationCapture",
    "PermissionState",
    "PostedNotification",
    "RawGuidance",
    "RelayBus",
    "RelayConfig",
    "RelayNotification",
    "RelaySubscription",
    "classify",
    "normalize_guidance",
]
