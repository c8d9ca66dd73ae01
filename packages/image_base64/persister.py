from __future__ import annotations

import asyncio
from pathlib import Path

from packages.contracts.models import SAVED_MESSAGE

from .codec import b64decode_lenient
from .dataurl import strip_meta
from .logging_utils import trace_logger

IMAGE_EXTENSION = ".jpg"


def target_path(base_name: str) -> Path:
    # Always .jpg, whatever the decoded content actually is.
    return Path(f"{base_name}{IMAGE_EXTENSION}")


def decoded_bytes(payload: bytes | str) -> bytes:
    if isinstance(payload, str):
        return b64decode_lenient(strip_meta(payload))
    return b64decode_lenient(payload)


async def save(payload: bytes | str, base_name: str, trace_id: str | None = None) -> str:
    """Write the Base64-decoded ``payload`` to ``{base_name}.jpg``.

    Relative names resolve against the current working directory. ``OSError``
    from the write propagates unchanged.
    """
    log = trace_logger("image_base64.persister", trace_id)
    path = target_path(base_name)
    data = decoded_bytes(payload)
    await asyncio.to_thread(path.write_bytes, data)
    log.debug("wrote %d bytes to %s", len(data), path)
    return SAVED_MESSAGE
