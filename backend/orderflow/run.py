"""Run the OrderFlow API under uvicorn (TLS when certificate files are configured)."""

import uvicorn

from orderflow.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "orderflow.main:app",
        host=settings.host,
        port=settings.port,
        ssl_certfile=settings.ssl_certfile,
        ssl_keyfile=settings.ssl_keyfile,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
