from __future__ import annotations

import base64
import string

B64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
URL_SAFE = str.maketrans("-_", "+/")


def b64encode_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode_lenient(data: bytes | bytearray | memoryview | str) -> bytes:
    """Decode Base64 the forgiving way: never raises.

    Bytes are read as Latin-1 characters. URL-safe ``-``/``_`` count as
    ``+``/``/``, decoding stops at the first ``=``, characters outside the
    alphabet are skipped and a lone trailing character is dropped.
    """
    text = data if isinstance(data, str) else bytes(data).decode("latin-1")
    text = text.translate(URL_SAFE).split("=", 1)[0]
    cleaned = "".join(ch for ch in text if ch in B64_ALPHABET)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def to_base64(data: bytes, as_string: bool) -> str | bytes:
    """Transform fetched bytes into the requested representation.

    ``as_string`` yields the standard Base64 text of ``data``. Otherwise the
    bytes themselves are read as Base64 text and decoded: the buffer form is
    a reinterpretation of the input, not an encoding of it.
    """
    if as_string:
        return b64encode_text(data)
    return b64decode_lenient(data)
