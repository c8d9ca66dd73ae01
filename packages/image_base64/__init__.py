"""Convert images to and from Base64."""

from .api import decode, encode
from .codec import b64decode_lenient, to_base64
from .dataurl import is_data_url, strip_meta
from .fetcher import fetch
from .persister import save

__all__ = [
    "b64decode_lenient",
    "decode",
    "encode",
    "fetch",
    "is_data_url",
    "save",
    "strip_meta",
    "to_base64",
]
