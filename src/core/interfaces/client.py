"""Telemetry client contract.

Why a Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The send pipeline is tested with a fake client, no network involved.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from core.domain.models import StreamResult


@runtime_checkable
class TelemetryClient(Protocol):
    """Minimal contract of an IOTHub client.

    Design rules:
    - `stream` blocks until the transfer completes or fails.
    - Failures are raised (`core.errors.StreamError`), never returned.
    """

    def set_verbose(self, verbose: bool) -> None:
        ...

    def stream(self, headers: str, stream: BinaryIO) -> StreamResult:
        """Send `headers` followed by the bytes read from `stream`."""

        ...

    def close(self) -> None:
        ...
