"""Custom exception hierarchy for mapsrelay.

The capture/relay pipeline itself never raises on notification data: missing
fields default, foreign sources are discarded and undeliverable events are
dropped. These exceptions cover configuration, outbound delivery and misuse
of the high-level relay object.
"""

from __future__ import annotations


class MapsRelayError(Exception):
    """Base exception for all mapsrelay errors."""


class MapsRelayConfigError(MapsRelayError):
    """Invalid or missing configuration."""


class MapsRelayStateError(MapsRelayError):
    """Operation attempted while the relay is not running."""


class MapsRelayTransportError(MapsRelayError):
    """Outbound delivery failure (network, non-2xx response)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
