from __future__ import annotations

import pytest

from core.domain.headers import (
    DEFAULT_HEADERS,
    parse_properties,
    resolve_headers,
    terminate_headers,
)
from core.domain.models import MessageProperty


def test_default_headers_when_none_given() -> None:
    assert resolve_headers(None) == "source:iotsend\n\n"
    assert resolve_headers(None) == DEFAULT_HEADERS


def test_semicolons_become_newlines() -> None:
    assert resolve_headers("a:1;b:2") == "a:1\nb:2"


@pytest.mark.parametrize(
    "raw",
    [
        "source:sensor",
        "a:1;b:2;c:3",
        ";;",
        "url:http://x/y?q=1;type:json; spaced : value ",
        "unicode:é;tab:\t",
    ],
)
def test_only_semicolons_are_rewritten(raw: str) -> None:
    out = resolve_headers(raw)
    assert len(out) == len(raw)
    for before, after in zip(raw, out):
        if before == ";":
            assert after == "\n"
        else:
            assert after == before


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a:1\nb:2", "a:1\nb:2\n\n"),
        ("a:1\n", "a:1\n\n"),
        ("source:iotsend\n\n", "source:iotsend\n\n"),
        ("", "\n"),
    ],
)
def test_terminate_headers(text: str, expected: str) -> None:
    assert terminate_headers(text) == expected


def test_parse_properties() -> None:
    props = parse_properties("a:1\nurl:http://x\n\nflag\n")
    assert props == [
        MessageProperty(key="a", value="1"),
        MessageProperty(key="url", value="http://x"),
        MessageProperty(key="flag", value=""),
    ]
