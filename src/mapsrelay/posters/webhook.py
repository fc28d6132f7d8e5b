"""HTTP webhook poster for relayed notifications."""

from __future__ import annotations

import json
import logging

import aiohttp

from mapsrelay._constants import USER_AGENT
from mapsrelay.exceptions import MapsRelayTransportError
from mapsrelay.models.notification import RelayNotification

_logger = logging.getLogger(__name__)


class WebhookPoster:
    """POST each relayed notification as JSON to a single webhook URL.

    The aiohttp session is created lazily unless one is passed in; an
    external session is never closed by the poster.
    """

    def __init__(
        self,
        url: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url
        self._http = session
        self._external_session = session is not None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http is None:
            self._http = aiohttp.ClientSession(timeout=self._timeout)
        return self._http

    async def post(self, notification: RelayNotification) -> None:
        headers = {
            "content-type": "application/json; charset=UTF-8",
            "user-agent": USER_AGENT,
        }
        body = json.dumps(notification.model_dump(mode="json"), ensure_ascii=False)

        _logger.debug("POST %s", self._url)

        try:
            async with self._require_session().post(self._url, data=body.encode("utf-8"), headers=headers) as resp:
                if resp.status >= 300:
                    text = await resp.text()
                    raise MapsRelayTransportError(
                        f"HTTP {resp.status} from webhook: {text[:200]}",
                        status_code=resp.status,
                        endpoint=self._url,
                    )
        except MapsRelayTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as exc:
            raise MapsRelayTransportError(
                f"Webhook request failed: {exc}",
                endpoint=self._url,
            ) from exc

    async def close(self) -> None:
        if not self._external_session and self._http is not None:
            await self._http.close()
        self._http = None
