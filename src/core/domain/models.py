"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge (command-line arguments) without coupling
  the core to typer/httpx.
- Results can be dumped to JSON/logs with `model_dump`.

Paths and header text come straight from argv, where bytes that are not
valid UTF-8 arrive as lone surrogates (surrogateescape). Those values are
kept as they are and never re-validated as unicode.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, PlainValidator
from pydantic.config import ConfigDict


def _raw_text(value: object) -> str:
    if not isinstance(value, str):
        raise ValueError("must be a string")
    return value


def _non_empty_raw_text(value: object) -> str:
    text = _raw_text(value)
    if not text:
        raise ValueError("must not be empty")
    return text


RawText = Annotated[str, PlainValidator(_raw_text)]
NonEmptyRawText = Annotated[str, PlainValidator(_non_empty_raw_text)]


class RunConfig(BaseModel):
    """Run configuration built once from the command line.

    Immutable: the CLI creates it, the send pipeline consumes it.
    """

    model_config = ConfigDict(frozen=True)

    verbose: bool = Field(
        default=False,
        description="Verbose output for the CLI and the IOTHub client.",
    )
    file_path: NonEmptyRawText | None = Field(
        default=None,
        description="Payload file; standard input when absent.",
    )
    headers: NonEmptyRawText | None = Field(
        default=None,
        description="Raw header string with ';'-separated key:value pairs.",
    )


class MessageProperty(BaseModel):
    """A single `key:value` message property."""

    model_config = ConfigDict(frozen=True)

    key: RawText
    value: RawText = ""


class StreamResult(BaseModel):
    """What the IOTHub client reports back after a stream call."""

    status_code: int = Field(..., ge=100, le=599)
    bytes_sent: int = Field(default=0, ge=0)
    truncated: bool = Field(
        default=False,
        description="True when the payload was cut at the max message size.",
    )


class SendResult(BaseModel):
    """Output of a send pipeline invocation."""

    headers: RawText = Field(..., description="Header text handed to the client.")
    source: RawText = Field(..., description="'stdin' or the payload file path.")
    stream: StreamResult | None = None
    warnings: list[str] = Field(default_factory=list)
