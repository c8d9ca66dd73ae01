"""Shared contracts for the image/Base64 library and its apps."""

from .errors import (
    EmptyResponseError,
    HTTPStatusError,
    ImageBase64Error,
    InvalidInputError,
    NetworkError,
)
from .models import (
    DEFAULT_FILENAME,
    SAVED_MESSAGE,
    DecodeOptions,
    DecodeRequest,
    DecodeResponse,
    EncodeOptions,
    EncodeRequest,
    EncodeResponse,
    ImageSource,
    LocalSource,
    RemoteSource,
    source_from,
)
from .utils import new_trace_id

__all__ = [
    "DEFAULT_FILENAME",
    "SAVED_MESSAGE",
    "DecodeOptions",
    "DecodeRequest",
    "DecodeResponse",
    "EmptyResponseError",
    "EncodeOptions",
    "EncodeRequest",
    "EncodeResponse",
    "HTTPStatusError",
    "ImageBase64Error",
    "ImageSource",
    "InvalidInputError",
    "LocalSource",
    "NetworkError",
    "RemoteSource",
    "new_trace_id",
    "source_from",
]
