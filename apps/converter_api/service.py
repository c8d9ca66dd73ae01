from __future__ import annotations

import logging
import mimetypes

import httpx
from fastapi import HTTPException

from apps.converter_api.logging_utils import TraceAdapter
from apps.converter_api.settings import ServiceSettings
from packages.contracts.errors import (
    EmptyResponseError,
    HTTPStatusError,
    InvalidInputError,
    NetworkError,
)
from packages.contracts.models import DecodeRequest, DecodeResponse, EncodeRequest, EncodeResponse
from packages.contracts.utils import new_trace_id
from packages.image_base64 import decode, encode
from packages.image_base64.persister import target_path

logger = logging.getLogger("converter_api.service")

UPSTREAM_ERRORS = (HTTPStatusError, EmptyResponseError, NetworkError)


def _data_url(source: str, encoded: str) -> str | None:
    mime, _ = mimetypes.guess_type(source.split("?", 1)[0])
    if not mime or not mime.startswith("image/"):
        return None
    return f"data:{mime};base64,{encoded}"


def _safe_filename(filename: str) -> bool:
    if filename in {".", ".."}:
        return False
    return "/" not in filename and "\\" not in filename


class ConverterService:
    def __init__(self, settings: ServiceSettings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self.client = client

    async def _encode_string(self, req: EncodeRequest, trace_id: str) -> str:
        options = {"string": True, "local": req.local}
        if self.client is not None:
            return await encode(req.source, options, client=self.client, trace_id=trace_id)
        async with httpx.AsyncClient(timeout=self.settings.http_timeout_seconds, follow_redirects=True) as client:
            return await encode(req.source, options, client=client, trace_id=trace_id)

    async def encode(self, req: EncodeRequest) -> EncodeResponse:
        trace_id = new_trace_id()
        log = TraceAdapter(logger, {"trace_id": trace_id})
        if req.local and not self.settings.allow_local:
            raise HTTPException(status_code=403, detail="local sources are disabled")

        try:
            encoded = await self._encode_string(req, trace_id)
        except InvalidInputError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except UPSTREAM_ERRORS as exc:
            log.warning("upstream failure: %s", exc)
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except FileNotFoundError as exc:
            raise HTTPException(status_code=404, detail="source file not found") from exc
        except OSError as exc:
            log.warning("local read failure: %s", exc)
            raise HTTPException(status_code=500, detail="could not read source file") from exc

        log.info("encoded source local=%s chars=%d", req.local, len(encoded))
        return EncodeResponse(base64=encoded, data_url=_data_url(req.source, encoded), trace_id=trace_id)

    async def decode(self, req: DecodeRequest) -> DecodeResponse:
        trace_id = new_trace_id()
        log = TraceAdapter(logger, {"trace_id": trace_id})
        if not _safe_filename(req.filename):
            raise HTTPException(status_code=400, detail="filename must not contain path components")

        base_name = str(self.settings.output_dir / req.filename)
        try:
            message = await decode(req.payload, {"filename": base_name}, trace_id=trace_id)
        except InvalidInputError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except OSError as exc:
            log.warning("write failure: %s", exc)
            raise HTTPException(status_code=500, detail="could not write image") from exc

        path = target_path(base_name)
        log.info("decoded payload to %s", path)
        return DecodeResponse(message=message, path=str(path), trace_id=trace_id)
