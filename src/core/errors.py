"""Core errors.

The CLI catches `IoTSendError` and turns it into a message on stderr plus a
non-zero exit code; nothing below the CLI prints.
"""

from __future__ import annotations


class IoTSendError(Exception):
    """Base class for every failure iotsend reports to the user."""


class InputNotFoundError(IoTSendError):
    """The requested payload file could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__("File not found")
        self.path = path


class ClientCreationError(IoTSendError):
    """The IOTHub client could not be created; no message is sent."""


class StreamError(IoTSendError):
    """The message could not be delivered to the IOTHub endpoint."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
