"""Main entrypoint exposing the FastAPI application factory."""

from __future__ import annotations

from gas_station_api.apps.api.app import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    from config import config

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        ssl_certfile=config.SSL_CERTFILE,
        ssl_keyfile=config.SSL_KEYFILE,
    )
