"""Outbound posters for re-announced notifications."""

from mapsrelay.posters.base import LoggingPoster, NotificationPoster
from mapsrelay.posters.webhook import WebhookPoster

__all__ = ["LoggingPoster", "NotificationPoster", "WebhookPoster"]
