from __future__ import annotations

import base64

# 1x1 transparent PNG.
SAMPLE_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
SAMPLE_PNG_BYTES = base64.b64decode(SAMPLE_PNG_BASE64)
SAMPLE_DATA_URL = f"data:image/png;base64,{SAMPLE_PNG_BASE64}"
