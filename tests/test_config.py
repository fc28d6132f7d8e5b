from __future__ import annotations

import pytest

from mapsrelay.config import RelayConfig
from mapsrelay.exceptions import MapsRelayConfigError


def test_defaults() -> None:
    config = RelayConfig()

    assert config.source_package == "com.google.android.apps.maps"
    assert config.initial_distance == "0 m"
    assert config.notification_timeout == 60.0
    assert config.mqtt_host is None
    assert config.webhook_url is None


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPSRELAY_MQTT_HOST", "broker.local")
    monkeypatch.setenv("MAPSRELAY_MQTT_PORT", "8883")
    monkeypatch.setenv("MAPSRELAY_MQTT_TLS", "yes")
    monkeypatch.setenv("MAPSRELAY_NOTIFICATION_TIMEOUT", "30")
    monkeypatch.setenv("MAPSRELAY_WEBHOOK_URL", "http://watch.local/notify")

    config = RelayConfig.from_env()

    assert config.mqtt_host == "broker.local"
    assert config.mqtt_port == 8883
    assert config.mqtt_tls is True
    assert config.notification_timeout == 30.0
    assert config.webhook_url == "http://watch.local/notify"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPSRELAY_MQTT_PORT", "8883")
    monkeypatch.setenv("MAPSRELAY_SOURCE_PACKAGE", "com.example.nav")

    config = RelayConfig.from_env(mqtt_port=1884, source_package="com.google.android.apps.maps")

    assert config.mqtt_port == 1884
    assert config.source_package == "com.google.android.apps.maps"


def test_invalid_number_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPSRELAY_MQTT_PORT", "not-a-port")

    with pytest.raises(MapsRelayConfigError):
        RelayConfig.from_env()


def test_blank_env_values_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPSRELAY_WEBHOOK_URL", "  ")

    assert RelayConfig.from_env().webhook_url is None
