from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


@dataclass(slots=True)
class ServiceSettings:
    host: str = "127.0.0.1"
    port: int = 8002
    output_dir: Path = field(default_factory=lambda: Path("."))
    allow_local: bool = False
    http_timeout_seconds: float = 15.0

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        return cls(
            host=os.getenv("IMAGE_BASE64_HOST", "127.0.0.1").strip(),
            port=int(os.getenv("IMAGE_BASE64_PORT", "8002")),
            output_dir=Path(os.getenv("IMAGE_BASE64_OUTPUT_DIR", ".").strip() or "."),
            allow_local=_env_flag("IMAGE_BASE64_ALLOW_LOCAL", False),
            http_timeout_seconds=float(os.getenv("IMAGE_BASE64_HTTP_TIMEOUT", "15.0")),
        )
