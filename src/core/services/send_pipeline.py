"""Message sending orchestration.

The CLI builds a `RunConfig` and a client and delegates everything else
here: header resolution, the advisory size check, opening the input and the
single stream call. Side-effects (printing) stay in the CLI through
`SendHooks`, which keeps this flow reusable from tests and other
entry-points.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator

from core.config import AppSettings
from core.domain.headers import resolve_headers
from core.domain.models import RunConfig, SendResult
from core.errors import InputNotFoundError
from core.interfaces.client import TelemetryClient

logger = logging.getLogger(__name__)

SIZE_WARNING = "Warning: Max file size exceeded\nFile will be truncated!"

STDIN_SOURCE = "stdin"


@dataclass
class SendHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None
    sending: Callable[[str, str], None] | None = None


def check_file_size(path: str, max_size: int) -> str | None:
    """Return the size warning when `path` is larger than `max_size`.

    Advisory only: a missing file is reported later, when opening it.
    """

    try:
        size = os.stat(path).st_size
    except OSError:
        return None
    if size > max_size:
        logger.debug("%s is %d bytes (max %d)", path, size, max_size)
        return SIZE_WARNING
    return None


@contextlib.contextmanager
def open_input(path: str | None, stdin: BinaryIO | None = None) -> Iterator[BinaryIO]:
    """Yield the payload stream; files are closed on exit, stdin is not."""

    if path is None:
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        fh = open(path, "rb")
    except OSError as exc:
        logger.debug("Cannot open %s: %s", path, exc)
        raise InputNotFoundError(path) from exc

    with fh:
        yield fh


def send_message(
    config: RunConfig,
    client: TelemetryClient,
    *,
    settings: AppSettings | None = None,
    stdin: BinaryIO | None = None,
    hooks: SendHooks | None = None,
) -> SendResult:
    """Send one IOT message described by `config` through `client`.

    Raises:
    - `InputNotFoundError` if the payload file cannot be opened (no stream call).
    - whatever the client raises on a failed transfer (`StreamError`).
    """

    settings = settings or AppSettings()
    hooks = hooks or SendHooks()
    warnings: list[str] = []

    headers = resolve_headers(config.headers)
    source = config.file_path or STDIN_SOURCE

    if config.file_path is not None:
        warning = check_file_size(config.file_path, settings.max_message_size)
        if warning:
            warnings.append(warning)
            if hooks.warning:
                hooks.warning(warning)

    with open_input(config.file_path, stdin) as stream:
        if hooks.sending:
            hooks.sending(headers, source)
        result = client.stream(headers, stream)

    return SendResult(
        headers=headers,
        source=source,
        stream=result,
        warnings=warnings,
    )
