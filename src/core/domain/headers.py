"""Message property (header) handling.

An IOT message starts with a list of properties, one `key:value` per line,
terminated by a blank line; the payload follows immediately:

    key-1:value-1\\n
    key-2:value-2\\n\\n
    <payload bytes>

On the command line several pairs are given in one argument separated by
`;` (``-H "a:1;b:2"``).
"""

from __future__ import annotations

from core.domain.models import MessageProperty

DEFAULT_HEADERS = "source:iotsend\n\n"

PAIR_SEPARATOR = ";"


def resolve_headers(raw: str | None) -> str:
    """Return the header text to send.

    `None` gives `DEFAULT_HEADERS`; otherwise every `;` becomes a newline and
    nothing else is touched.
    """

    if raw is None:
        return DEFAULT_HEADERS
    return raw.replace(PAIR_SEPARATOR, "\n")


def terminate_headers(text: str) -> str:
    """Make sure the header block ends with a blank line."""

    if not text:
        return "\n"
    if text.endswith("\n\n"):
        return text
    if text.endswith("\n"):
        return text + "\n"
    return text + "\n\n"


def parse_properties(text: str) -> list[MessageProperty]:
    props: list[MessageProperty] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        props.append(MessageProperty(key=key, value=value if sep else ""))
    return props
