from __future__ import annotations

import uvicorn

from plate_configurator.config import Settings


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(
        "plate_configurator.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
