from __future__ import annotations

import httpx
from fastapi import FastAPI

from apps.converter_api.logging_utils import configure_logging
from apps.converter_api.service import ConverterService
from apps.converter_api.settings import ServiceSettings
from packages.contracts.models import DecodeRequest, DecodeResponse, EncodeRequest, EncodeResponse

configure_logging()


def create_app(settings: ServiceSettings | None = None, client: httpx.AsyncClient | None = None) -> FastAPI:
    app = FastAPI(title="Image Base64 Converter API", version="0.1.0")
    service = ConverterService(settings=settings or ServiceSettings.from_env(), client=client)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/v1/encode", response_model=EncodeResponse)
    async def encode_image(req: EncodeRequest) -> EncodeResponse:
        return await service.encode(req)

    @app.post("/v1/decode", response_model=DecodeResponse)
    async def decode_image(req: DecodeRequest) -> DecodeResponse:
        return await service.decode(req)

    return app


app = create_app()
