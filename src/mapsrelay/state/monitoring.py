"""Monitoring state machine.

Tracks whether relaying is armed. Listener access is granted or revoked
from outside; while it is missing the machine stays ``DISABLED`` whatever
the user toggles. The machine renders nothing: the UI queries
:attr:`MonitoringStateMachine.current_state` and draws its own status.

Transitions::

    permission_revoked   any      -> DISABLED  (stops capture if ACTIVE)
    permission_granted   DISABLED -> READY
    toggle               READY    -> ACTIVE    (starts capture)
    toggle               ACTIVE   -> READY     (stops capture)
    toggle               DISABLED -> DISABLED  (asks for permission)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Protocol


class MonitoringState(StrEnum):
    DISABLED = "disabled"
    READY = "ready"
    ACTIVE = "active"


class CaptureObserver(Protocol):
    """Start/stop hooks of the component that observes source notifications."""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


class MonitoringStateMachine:
    def __init__(
        self,
        observer: CaptureObserver,
        *,
        permission_granted: bool = False,
        on_permission_request: Callable[[], None] | None = None,
        on_change: Callable[[MonitoringState, MonitoringState], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._observer = observer
        self._on_permission_request = on_permission_request
        self._on_change = on_change
        self._logger = logger or logging.getLogger(__name__)
        self._state = MonitoringState.READY if permission_granted else MonitoringState.DISABLED

    @property
    def current_state(self) -> MonitoringState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == MonitoringState.ACTIVE

    def permission_granted(self) -> None:
        if self._state != MonitoringState.DISABLED:
            return
        self._set_state(MonitoringState.READY)

    def permission_revoked(self) -> None:
        previous = self._state
        if previous == MonitoringState.DISABLED:
            return
        self._set_state(MonitoringState.DISABLED)
        if previous == MonitoringState.ACTIVE:
            self._observer.stop()

    def update_permission(self, granted: bool) -> None:
        """Feed a polled permission flag into the machine."""
        if granted:
            self.permission_granted()
        else:
            self.permission_revoked()

    def toggle(self) -> MonitoringState:
        """Flip between READY and ACTIVE; asks for permission while DISABLED."""
        if self._state == MonitoringState.DISABLED:
            self._logger.debug("Toggle ignored: listener access missing")
            if self._on_permission_request is not None:
                self._on_permission_request()
            return self._state

        if self._state == MonitoringState.READY:
            self._observer.start()
            self._set_state(MonitoringState.ACTIVE)
        else:
            self._observer.stop()
            self._set_state(MonitoringState.READY)
        return self._state

    def _set_state(self, new_state: MonitoringState) -> None:
        old_state = self._state
        self._state = new_state
        self._logger.info("Monitoring %s -> %s", old_state, new_state)
        if self._on_change is not None:
            self._on_change(old_state, new_state)
