"""IOTHub client (HTTP adapter).

Exposes the four operations of the vendor client: create, configure
(`set_verbose`), stream and close. A message is posted as one request whose
body is the header block followed immediately by the payload bytes.

Payloads longer than `AppSettings.max_message_size` are cut at that size;
the CLI only warns about it beforehand. Redirects are not followed: a 3xx
answer is a failed send.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.headers import terminate_headers
from core.domain.models import StreamResult
from core.errors import ClientCreationError, StreamError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/octet-stream"


class _MessageBody:
    """Iterable request body: header block, then the payload in chunks."""

    def __init__(self, headers: str, stream: BinaryIO, *, limit: int, chunk_size: int) -> None:
        self._head = terminate_headers(headers).encode("utf-8", errors="surrogateescape")
        self._stream = stream
        self._limit = limit
        self._chunk_size = chunk_size
        self.payload_bytes = 0
        self.truncated = False

    @property
    def bytes_sent(self) -> int:
        return len(self._head) + self.payload_bytes

    def __iter__(self) -> Iterator[bytes]:
        yield self._head
        remaining = self._limit
        while remaining > 0:
            chunk = self._stream.read(min(self._chunk_size, remaining))
            if not chunk:
                return
            self.payload_bytes += len(chunk)
            remaining -= len(chunk)
            yield chunk
        # Budget exhausted: anything left over is dropped.
        if self._stream.read(1):
            self.truncated = True


class IoTClient:
    """Sends IOT messages to the configured IOTHub endpoint."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = _validate_endpoint(self._settings.endpoint_url)
        self._verbose = False
        self._client = build_client(
            self._settings,
            extra_headers={"Content-Type": CONTENT_TYPE},
            transport=transport,
        )

    @classmethod
    def create(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "IoTClient":
        return cls(settings, transport=transport)

    @property
    def verbose(self) -> bool:
        return self._verbose

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = verbose

    def stream(self, headers: str, stream: BinaryIO) -> StreamResult:
        """Stream one message and block until the endpoint answers."""

        body = _MessageBody(
            headers,
            stream,
            limit=self._settings.max_message_size,
            chunk_size=self._settings.chunk_size,
        )
        if self._verbose:
            logger.info("Streaming message to %s", self._url)

        try:
            response = self._client.post(self._url, content=body)
        except httpx.HTTPError as exc:
            raise StreamError(f"Send failed: {exc}") from exc

        if body.truncated:
            logger.warning(
                "Payload truncated to %d bytes", self._settings.max_message_size
            )
        if self._verbose:
            logger.info(
                "IOTHub answered HTTP %d (%d bytes sent)",
                response.status_code,
                body.bytes_sent,
            )

        if not response.is_success:
            raise StreamError(
                f"Send failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return StreamResult(
            status_code=response.status_code,
            bytes_sent=body.bytes_sent,
            truncated=body.truncated,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "IoTClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _validate_endpoint(url: str | None) -> httpx.URL:
    if not url:
        raise ClientCreationError(
            "No IOTHub endpoint configured (set IOTSEND_ENDPOINT_URL)"
        )
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ClientCreationError(f"Invalid IOTHub endpoint: {url}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ClientCreationError(f"Invalid IOTHub endpoint: {url}")
    return parsed
