from __future__ import annotations

from typing import BinaryIO

import pytest

from core.config import AppSettings
from core.domain.models import StreamResult
from core.errors import StreamError

ENDPOINT = "https://hub.example.test/messages"


class FakeClient:
    """Records stream calls instead of talking to an IOTHub endpoint."""

    def __init__(self, *, fail_with: StreamError | None = None) -> None:
        self.calls: list[tuple[str, bytes]] = []
        self.streams: list[BinaryIO] = []
        self.verbose = False
        self.closed = False
        self._fail_with = fail_with

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose

    def stream(self, headers: str, stream: BinaryIO) -> StreamResult:
        payload = stream.read()
        self.calls.append((headers, payload))
        self.streams.append(stream)
        if self._fail_with is not None:
            raise self._fail_with
        return StreamResult(status_code=202, bytes_sent=len(headers) + len(payload))

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(endpoint_url=ENDPOINT, max_message_size=16, _env_file=None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "IOTSEND_ENDPOINT_URL",
        "IOTSEND_API_TOKEN",
        "IOTSEND_MAX_MESSAGE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray project .env out of AppSettings().
    monkeypatch.chdir(tmp_path)
