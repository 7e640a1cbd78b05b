from __future__ import annotations

import json
import logging
from collections.abc import Iterable

import httpx

from eventcapture.config import CaptureSettings, get_settings
from eventcapture.errors import EncodingError, RejectedError, TransportError
from eventcapture.events import Event
from eventcapture.options import ApiOptions

logger = logging.getLogger(__name__)

CAPTURE_PATH = "capture/"


class Client:
    """Async client posting single events to the capture endpoint."""

    def __init__(
        self,
        options: ApiOptions,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        settings: CaptureSettings | None = None,
    ) -> None:
        self.options = options
        self._owns_client = client is None
        if client is None:
            if timeout is None:
                timeout = (settings or get_settings()).capture_timeout
            client = httpx.AsyncClient(timeout=timeout)
        # Applied per request so an injected client keeps its own default
        self._timeout = httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT
        self._client = client
        self.url = options.host.rstrip("/") + "/" + CAPTURE_PATH

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def set_timeout(self, timeout: float) -> None:
        """Change the timeout used by later `capture` calls on this client only."""
        self._timeout = httpx.Timeout(timeout)

    async def capture(self, event: Event) -> None:
        """Send one event.

        Raises:
            EncodingError: the event could not be serialized to JSON.
            TransportError: no HTTP response was received.
            RejectedError: the endpoint answered with a non-2xx status.
        """
        try:
            body = json.dumps(event.to_payload(self.options.api_key))
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Cannot serialize event {event.name!r}: {exc}") from exc

        try:
            response = await self._client.post(
                self.url,
                content=body,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise TransportError(f"Failed to reach {self.url}: {exc}") from exc

        if not response.is_success:
            raise RejectedError(response.status_code, response.text)
        logger.debug("Captured event %s: HTTP %s", event.name, response.status_code)

    async def capture_batch(self, events: Iterable[Event]) -> None:
        """Capture events one request at a time, stopping at the first failure."""
        for event in events:
            await self.capture(event)
