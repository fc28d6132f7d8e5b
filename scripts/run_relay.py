#!/usr/bin/env python3
"""Run the navigation relay against an MQTT notification bridge.

The bridge on the phone publishes every posted notification as JSON to
an MQTT topic; this script relays Google Maps guidance from it and prints
the activity log as events arrive.

Usage
-----
Set environment variables and run::

    export MAPSRELAY_MQTT_HOST="broker.local"
    export MAPSRELAY_WEBHOOK_URL="http://watch-bridge.local/notify"   # optional
    python scripts/run_relay.py

Options::

    --host HOST          MQTT broker host (overrides MAPSRELAY_MQTT_HOST)
    --port PORT          MQTT broker port
    --topic TOPIC        Topic the bridge publishes to
    --webhook URL        Relay target for re-announced notifications
    --no-post            Log only; do not post notifications
    -v, --verbose        Debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import signal
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from mapsrelay import MapsRelay, MapsRelayConfigError, PermissionState, RelayConfig  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Relay Google Maps guidance notifications.")
    parser.add_argument("--host", help="MQTT broker host")
    parser.add_argument("--port", type=int, help="MQTT broker port")
    parser.add_argument("--topic", help="MQTT topic with posted notifications")
    parser.add_argument("--webhook", help="Webhook URL for relayed notifications")
    parser.add_argument("--no-post", action="store_true", help="Only write the activity log")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


async def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.host:
        overrides["mqtt_host"] = args.host
    if args.port:
        overrides["mqtt_port"] = args.port
    if args.topic:
        overrides["mqtt_topic"] = args.topic
    if args.webhook:
        overrides["webhook_url"] = args.webhook

    try:
        config = RelayConfig.from_env(**overrides)
    except MapsRelayConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if not config.mqtt_host:
        print("An MQTT broker is required (--host or MAPSRELAY_MQTT_HOST).", file=sys.stderr)
        return 2

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)

    permissions = PermissionState(listener_access=True, post_notifications=not args.no_post)
    async with MapsRelay(config, permissions=permissions) as relay:
        relay.toggle()
        print(relay.status.status_text)
        printed = 0
        while not stop.is_set():
            with contextlib.suppress(TimeoutError):
                await asyncio.wait_for(stop.wait(), timeout=1.0)
            for entry in relay.log.since(printed):
                print(entry, end="")
            printed = relay.log.written

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
