"""Relay configuration for mapsrelay."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from mapsrelay._constants import (
    CHANNEL_ID,
    GOOGLE_MAPS_PACKAGE,
    INITIAL_DISTANCE,
    MQTT_DEFAULT_PORT,
    MQTT_DEFAULT_TOPIC,
    NOTIFICATION_TIMEOUT_SECONDS,
)
from mapsrelay.exceptions import MapsRelayConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value)
    except ValueError as exc:
        raise MapsRelayConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RelayConfig:
    """Relay configuration.

    Parameters
    ----------
    source_package : str
        Identifier of the only application whose notifications are relayed.
        Matched exactly; there is no wildcard or allow-list.
    initial_distance : str
        Carry-forward distance used until the first non-empty distance
        arrives.
    notification_timeout : float
        Seconds after which the relayed notification dismisses itself.
    channel_id : str
        Notification channel the relayed notification is posted on.
    mqtt_host : str or None
        Broker host for the MQTT notification source. ``None`` disables it.
    mqtt_port : int
        Broker port.
    mqtt_topic : str
        Topic the phone-side bridge publishes posted notifications to.
    mqtt_keepalive : int
        MQTT keepalive in seconds.
    mqtt_tls : bool
        Enable TLS on the broker connection.
    webhook_url : str or None
        Relay target for re-announced notifications. ``None`` logs them only.
    log_max_entries : int
        Number of entries the on-screen activity log retains.
    """

    source_package: str = GOOGLE_MAPS_PACKAGE
    initial_distance: str = INITIAL_DISTANCE
    notification_timeout: float = NOTIFICATION_TIMEOUT_SECONDS
    channel_id: str = CHANNEL_ID
    mqtt_host: str | None = None
    mqtt_port: int = MQTT_DEFAULT_PORT
    mqtt_topic: str = MQTT_DEFAULT_TOPIC
    mqtt_keepalive: int = 60
    mqtt_tls: bool = False
    webhook_url: str | None = None
    log_max_entries: int = 500

    @classmethod
    def from_env(cls, **overrides: Any) -> RelayConfig:
        """Create configuration from ``MAPSRELAY_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        MapsRelayConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "MAPSRELAY_SOURCE_PACKAGE": "source_package",
            "MAPSRELAY_INITIAL_DISTANCE": "initial_distance",
            "MAPSRELAY_CHANNEL_ID": "channel_id",
            "MAPSRELAY_MQTT_HOST": "mqtt_host",
            "MAPSRELAY_MQTT_TOPIC": "mqtt_topic",
            "MAPSRELAY_WEBHOOK_URL": "webhook_url",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip():
                config_kwargs[field_name] = val.strip()

        _ENV_NUMBER_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "MAPSRELAY_NOTIFICATION_TIMEOUT": ("notification_timeout", float),
            "MAPSRELAY_MQTT_PORT": ("mqtt_port", int),
            "MAPSRELAY_MQTT_KEEPALIVE": ("mqtt_keepalive", int),
            "MAPSRELAY_LOG_MAX_ENTRIES": ("log_max_entries", int),
        }
        for env_key, (field_name, kind) in _ENV_NUMBER_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val, kind)

        if "mqtt_tls" not in overrides:
            config_kwargs["mqtt_tls"] = _env_bool(env.get("MAPSRELAY_MQTT_TLS"), False)

        config_kwargs.update(overrides)

        config = cls(**config_kwargs)
        if not config.source_package:
            raise MapsRelayConfigError("source_package must be non-empty")
        if config.log_max_entries <= 0:
            raise MapsRelayConfigError("log_max_entries must be positive")
        return config
