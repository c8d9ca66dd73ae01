from __future__ import annotations

import asyncio
from pathlib import Path

import httpx

from packages.contracts.errors import (
    EmptyResponseError,
    HTTPStatusError,
    InvalidInputError,
    NetworkError,
)
from packages.contracts.models import ImageSource, LocalSource

from .logging_utils import trace_logger


async def _read_local(path: str) -> bytes:
    return await asyncio.to_thread(Path(path).read_bytes)


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    try:
        return await client.get(url)
    except httpx.InvalidURL as exc:
        raise InvalidInputError(f"URL is undefined or not properly formatted: {exc}") from exc
    except httpx.RequestError as exc:
        # Transport failures plus redirect loops and undecodable bodies.
        raise NetworkError(f"Error retrieving image - {exc.__class__.__name__}: {exc}") from exc


async def _read_remote(url: str, client: httpx.AsyncClient | None) -> bytes:
    if client is not None:
        response = await _get(client, url)
    else:
        async with httpx.AsyncClient(follow_redirects=True) as owned:
            response = await _get(owned, url)

    body = response.content
    if not body:
        raise EmptyResponseError()
    # Strict equality: 201, 204 and unfollowed redirects are failures too.
    if response.status_code != 200:
        raise HTTPStatusError(response.status_code)
    return body


async def fetch(
    source: ImageSource,
    client: httpx.AsyncClient | None = None,
    trace_id: str | None = None,
) -> bytes:
    """Retrieve the raw bytes of an image.

    Local paths are read whole; ``OSError`` propagates as-is. Remote URLs get
    a single GET. ``client`` is used as given (its timeout and redirect
    settings apply) and left open.
    """
    log = trace_logger("image_base64.fetcher", trace_id)
    if isinstance(source, LocalSource):
        data = await _read_local(source.path)
        log.debug("read %d bytes from %s", len(data), source.path)
        return data

    data = await _read_remote(source.url, client)
    log.debug("fetched %d bytes from %s", len(data), source.url)
    return data
