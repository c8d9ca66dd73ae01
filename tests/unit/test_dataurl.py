from __future__ import annotations

import pytest

from packages.image_base64.dataurl import is_data_url, strip_meta
from tests.fixtures.sample_data import SAMPLE_DATA_URL, SAMPLE_PNG_BASE64


@pytest.mark.parametrize(
    "candidate",
    [
        "data:image/png;base64,aGVsbG8=",
        SAMPLE_DATA_URL,
        "  DATA:IMAGE/JPEG;BASE64,aGVsbG8=  ",
        "data:,hello%20world",
        "data:text/plain;charset=utf-8,hi",
        "data:;base64,aGVsbG8=",
        "data:image/svg+xml;base64,PHN2Zz4=",
    ],
)
def test_accepts_data_urls(candidate: str) -> None:
    assert is_data_url(candidate)


@pytest.mark.parametrize(
    "candidate",
    [
        "not a data url",
        "",
        SAMPLE_PNG_BASE64,
        "data:image/png;base64",
        "data:image/png;base64,<script>",
        "https://example.com/cat.png",
    ],
)
def test_rejects_other_strings(candidate: str) -> None:
    assert not is_data_url(candidate)


def test_non_strings_are_not_data_urls() -> None:
    assert not is_data_url(None)
    assert not is_data_url(b"data:image/png;base64,aGVsbG8=")


def test_strip_meta_returns_body() -> None:
    assert strip_meta(" data:image/png;base64,aGVsbG8=\n") == "aGVsbG8="
    assert strip_meta("aGVsbG8=") == "aGVsbG8="
