from __future__ import annotations

import uvicorn

from apps.converter_api.settings import ServiceSettings


def main() -> None:
    settings = ServiceSettings.from_env()
    uvicorn.run("apps.converter_api.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
