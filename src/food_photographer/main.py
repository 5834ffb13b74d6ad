"""Command-line entrypoint serving the HTTP API."""

import uvicorn

from food_photographer.config import Settings

ASGI_APP = "food_photographer.api.asgi:app"


def main() -> None:
    """Serve the API with uvicorn using host and port from settings."""
    settings = Settings()
    uvicorn.run(
        ASGI_APP,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
