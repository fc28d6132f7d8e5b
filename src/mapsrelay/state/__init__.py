"""State layer.

Holds the monitoring state machine that decides whether capture is armed,
and the permission snapshot that drives it.
"""

from mapsrelay.state.monitoring import CaptureObserver, MonitoringState, MonitoringStateMachine
from mapsrelay.state.permissions import PermissionState

__all__ = [
    "CaptureObserver",
    "MonitoringState",
    "MonitoringStateMachine",
    "PermissionState",
]
