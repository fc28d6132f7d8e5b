"""MQTT notification source.

A phone-side bridge publishes every posted notification as JSON::

    {"package": "com.google.android.apps.maps",
     "extras": {"android.title": "200 m", "android.text": "Turn left", ...}}

This source subscribes to that topic with a threaded paho-mqtt client and
hands each decoded notification to the capture callback on paho's network
thread. paho dispatches messages one at a time, so delivery is serial.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, cast

import paho.mqtt.client as mqtt
from pydantic import ValidationError

from mapsrelay._constants import MQTT_DEFAULT_PORT, MQTT_DEFAULT_TOPIC
from mapsrelay.config import RelayConfig
from mapsrelay.exceptions import MapsRelayConfigError
from mapsrelay.models.guidance import PostedNotification
from mapsrelay.sources.base import OnPosted


@dataclass(frozen=True)
class MqttSourceSettings:
    """Broker details for the notification bridge."""

    host: str
    port: int = MQTT_DEFAULT_PORT
    topic: str = MQTT_DEFAULT_TOPIC
    keepalive: int = 60
    tls: bool = False
    client_id: str = ""

    @classmethod
    def from_config(cls, config: RelayConfig) -> MqttSourceSettings:
        if not config.mqtt_host:
            raise MapsRelayConfigError("mqtt_host is required for the MQTT notification source")
        return cls(
            host=config.mqtt_host,
            port=config.mqtt_port,
            topic=config.mqtt_topic,
            keepalive=config.mqtt_keepalive,
            tls=config.mqtt_tls,
        )


def decode_notification_payload(payload: bytes) -> PostedNotification | None:
    """Decode a bridge message; ``None`` for anything that is not a notification."""
    try:
        parsed = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(parsed, dict):
        return None
    try:
        return PostedNotification.model_validate(parsed)
    except ValidationError:
        return None


class MqttNotificationSource:
    """Threaded paho-mqtt runtime that emits posted notifications."""

    def __init__(
        self,
        settings: MqttSourceSettings,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._logger = logger or logging.getLogger(__name__)
        self._client: mqtt.Client | None = None
        self._on_posted: OnPosted | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Whether the MQTT runtime is actively running."""
        return self._running

    def _handle_payload(self, topic: str, payload: bytes) -> None:
        notification = decode_notification_payload(payload)
        if notification is None:
            self._logger.debug("MQTT payload is not a notification topic=%s", topic)
            return
        callback = self._on_posted
        if callback is not None:
            callback(notification)

    def start(self, on_posted: OnPosted) -> None:
        """Connect and subscribe; notifications go to *on_posted*."""
        self.stop()
        settings = self._settings
        self._logger.debug(
            "MQTT source start requested host=%s port=%s topic=%s",
            settings.host,
            settings.port,
            settings.topic,
        )

        client = mqtt.Client(
            callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
            client_id=settings.client_id,
            protocol=mqtt.MQTTv5,
        )
        client.enable_logger(self._logger)
        if settings.tls:
            client.tls_set()

        def on_connect(
            c: mqtt.Client,
            _userdata: Any,
            _flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if reason_code.value != 0:
                self._logger.warning("MQTT connect failed: %s", reason_code)
                return
            self._logger.info("Notification listener connected topic=%s", settings.topic)
            c.subscribe(settings.topic, qos=0)

        def on_message(_c: mqtt.Client, _userdata: Any, msg: mqtt.MQTTMessage) -> None:
            try:
                self._handle_payload(msg.topic, msg.payload)
            except Exception:
                # Never let a bad message kill paho's network thread.
                self._logger.warning("Notification handling failed topic=%s", msg.topic, exc_info=True)

        def on_disconnect(
            _client: mqtt.Client,
            _userdata: Any,
            _disconnect_flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if self._running:
                self._logger.debug("MQTT disconnected: %s", reason_code)

        client.on_connect = on_connect
        client.on_message = on_message
        client.on_disconnect = on_disconnect

        self._on_posted = on_posted
        # Connect from the network thread; paho retries until stop().
        client.connect_async(settings.host, settings.port, keepalive=settings.keepalive)
        client.loop_start()

        self._client = client
        self._running = True
        self._logger.debug("MQTT network loop started")

    def stop(self) -> None:
        """Stop and disconnect current MQTT client if running."""
        client = self._client
        self._client = None
        was_running = self._running
        self._running = False
        self._on_posted = None

        if client is None:
            return
        try:
            if was_running:
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.info("Notification listener disconnected")
