"""Async entry points.

Each call validates its arguments, performs one I/O step and one transform,
and either returns a result or raises. Validation failures are raised from
inside the coroutine as well, so nothing surfaces until the call is awaited.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from packages.contracts.models import DecodeOptions, EncodeOptions, source_from

from .codec import to_base64
from .fetcher import fetch
from .logging_utils import trace_logger
from .persister import save
from .validation import decode_options, encode_options, validate_payload, validate_source


async def encode(
    source: Any,
    options: EncodeOptions | Mapping[str, Any] | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    trace_id: str | None = None,
) -> str | bytes:
    """Encode a remote or local image.

    With ``string``/``as_string`` set the result is Base64 text; otherwise it
    is the buffer form described in ``codec.to_base64``. ``wrap`` is ignored.
    """
    url = validate_source(source)
    opts = encode_options(options)
    log = trace_logger("image_base64.api", trace_id)
    log.debug("encode local=%s as_string=%s", opts.local, opts.as_string)

    data = await fetch(source_from(url, opts.local), client=client, trace_id=trace_id)
    return to_base64(data, opts.as_string)


async def decode(
    payload: Any,
    options: DecodeOptions | Mapping[str, Any] | None = None,
    *,
    trace_id: str | None = None,
) -> str:
    """Save a Base64 payload (byte buffer or data URL string) as ``{filename}.jpg``."""
    checked = validate_payload(payload)
    opts = decode_options(options)
    return await save(checked, opts.filename, trace_id=trace_id)
