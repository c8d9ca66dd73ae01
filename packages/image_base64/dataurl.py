from __future__ import annotations

import re
from typing import Any

DATA_URL_PATTERN = re.compile(
    r"^\s*data:"
    r"([a-z]+/[a-z0-9\-+]+(;[a-z\-]+=[a-z0-9\-]+)?)?"
    r"(;base64)?"
    r",[a-z0-9!$&',()*+;=\-._~:@/?%\s]*\s*$",
    re.IGNORECASE,
)


def is_data_url(candidate: Any) -> bool:
    """Return True when ``candidate`` is a data URL string.

    The MIME type, its single ``;key=value`` parameter and the ``;base64``
    marker are optional; the ``data:`` scheme and the comma are not.
    """
    if not isinstance(candidate, str):
        return False
    return DATA_URL_PATTERN.match(candidate) is not None


def strip_meta(data_url: str) -> str:
    """Drop the ``data:...,`` prefix and return the payload body."""
    _, sep, body = data_url.strip().partition(",")
    if not sep:
        return data_url.strip()
    return body.strip()
