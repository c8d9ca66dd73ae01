from __future__ import annotations

import pytest

from packages.contracts.errors import InvalidInputError
from packages.contracts.models import DecodeOptions, EncodeOptions
from packages.image_base64.validation import (
    decode_options,
    encode_options,
    validate_payload,
    validate_source,
)


@pytest.mark.parametrize("source", [None, 42, b"https://example.com/a.png", "", "   ", ["a"], "pixel\x00.png"])
def test_validate_source_rejects_non_strings_and_blank(source) -> None:
    with pytest.raises(InvalidInputError, match="URL is undefined"):
        validate_source(source)


def test_validate_source_accepts_any_non_empty_string() -> None:
    assert validate_source("relative/path.png") == "relative/path.png"


@pytest.mark.parametrize("payload", [b"", b"\x00\x01garbage", bytearray(b"abc"), memoryview(b"xyz")])
def test_buffers_always_pass(payload) -> None:
    assert validate_payload(payload) == bytes(payload)


def test_data_url_strings_pass() -> None:
    assert validate_payload("data:image/png;base64,aGVsbG8=") == "data:image/png;base64,aGVsbG8="


@pytest.mark.parametrize("payload", ["aGVsbG8=", "not a data url", "", None, 12])
def test_other_payloads_fail(payload) -> None:
    with pytest.raises(InvalidInputError, match="not a Buffer object"):
        validate_payload(payload)


def test_encode_options_defaults_and_aliases() -> None:
    assert encode_options(None) == EncodeOptions()
    opts = encode_options({"string": True, "local": True, "wrap": 76})
    assert opts.as_string is True
    assert opts.local is True
    assert opts.wrap == 76
    assert encode_options({"asString": True}).as_string is True
    assert encode_options(EncodeOptions(as_string=True)).as_string is True


@pytest.mark.parametrize("options", [{"wrap": -1}, {"local": "maybe"}, ["string"]])
def test_encode_options_invalid(options) -> None:
    with pytest.raises(InvalidInputError):
        encode_options(options)


def test_decode_options() -> None:
    assert decode_options(None).filename == "saved-image"
    assert decode_options({"filename": "foo"}) == DecodeOptions(filename="foo")
    with pytest.raises(InvalidInputError):
        decode_options({"filename": ""})


def test_unknown_option_keys_are_ignored() -> None:
    opts = encode_options({"string": True, "colour": "red"})
    assert opts.as_string is True
    assert decode_options({"filename": "foo", "quality": 90}).filename == "foo"


def test_decode_options_reject_nul_in_filename() -> None:
    with pytest.raises(InvalidInputError):
        decode_options({"filename": "out/a\x00b"})
