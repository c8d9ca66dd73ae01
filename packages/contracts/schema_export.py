from __future__ import annotations

import json
from pathlib import Path

from .models import (
    DecodeOptions,
    DecodeRequest,
    DecodeResponse,
    EncodeOptions,
    EncodeRequest,
    EncodeResponse,
)


def export_schemas(output_dir: Path) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    schemas = {
        "encode_options.schema.json": EncodeOptions.model_json_schema(),
        "decode_options.schema.json": DecodeOptions.model_json_schema(),
        "encode_request.schema.json": EncodeRequest.model_json_schema(),
        "encode_response.schema.json": EncodeResponse.model_json_schema(),
        "decode_request.schema.json": DecodeRequest.model_json_schema(),
        "decode_response.schema.json": DecodeResponse.model_json_schema(),
    }
    written: list[Path] = []
    for name, schema in schemas.items():
        path = output_dir / name
        path.write_text(json.dumps(schema, indent=2), encoding="utf-8")
        written.append(path)
    return written


if __name__ == "__main__":
    export_schemas(Path(__file__).resolve().parent / "schemas")
