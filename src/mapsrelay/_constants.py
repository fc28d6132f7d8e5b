"""Internal constants shared across the library."""

GOOGLE_MAPS_PACKAGE = "com.google.android.apps.maps"
INITIAL_DISTANCE = "0 m"

# ------------------------------------------------------------------
# Android notification extras keys
# ------------------------------------------------------------------

EXTRA_TITLE = "android.title"
EXTRA_TEXT = "android.text"
EXTRA_SUB_TEXT = "android.subText"

# ------------------------------------------------------------------
# Relayed notification defaults
# ------------------------------------------------------------------

CHANNEL_ID = "maps_notify_channel"
CHANNEL_NAME = "Maps Notifications"
NOTIFICATION_ID = 1001
NOTIFICATION_TIMEOUT_SECONDS = 60.0
BODY_MARKER = "🗺️"
DEFAULT_TITLE = "Maps"
DEFAULT_BODY = "Navigation update"
LOG_MARKER = "📱⌚"

# ------------------------------------------------------------------
# Transport defaults
# ------------------------------------------------------------------

MQTT_DEFAULT_PORT = 1883
MQTT_DEFAULT_TOPIC = "mapsrelay/notifications"
USER_AGENT = "mapsrelay"
