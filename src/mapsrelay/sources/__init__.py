"""Notification sources (platform collaborators)."""

from mapsrelay.sources.base import InMemoryNotificationSource, NotificationSource, OnPosted
from mapsrelay.sources.mqtt import MqttNotificationSource, MqttSourceSettings, decode_notification_payload

__all__ = [
    "InMemoryNotificationSource",
    "MqttNotificationSource",
    "MqttSourceSettings",
    "NotificationSource",
    "OnPosted",
    "decode_notification_payload",
]
