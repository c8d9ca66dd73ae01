from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from packages.contracts.errors import InvalidInputError
from packages.contracts.models import DecodeOptions, EncodeOptions

from .dataurl import is_data_url

BUFFER_TYPES = (bytes, bytearray, memoryview)


def validate_source(source: Any) -> str:
    if not isinstance(source, str) or not source.strip() or "\x00" in source:
        raise InvalidInputError("URL is undefined or not properly formatted")
    return source


def validate_payload(payload: Any) -> bytes | str:
    """Gate decode input.

    Byte buffers pass whatever they hold; strings must be data URLs.
    """
    if isinstance(payload, BUFFER_TYPES):
        return bytes(payload)
    if isinstance(payload, str) and is_data_url(payload):
        return payload
    raise InvalidInputError("The image is not a Buffer object or Base 64 encoded data string")


def _coerce(model: type, options: Any):
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if not isinstance(options, Mapping):
        raise InvalidInputError(f"options must be a mapping or {model.__name__}, got {type(options).__name__}")
    try:
        return model.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidInputError(f"invalid {model.__name__}: {exc.errors(include_url=False)}") from exc


def encode_options(options: EncodeOptions | Mapping[str, Any] | None) -> EncodeOptions:
    return _coerce(EncodeOptions, options)


def decode_options(options: DecodeOptions | Mapping[str, Any] | None) -> DecodeOptions:
    return _coerce(DecodeOptions, options)
