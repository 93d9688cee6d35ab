from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file="./.env", extra="ignore")

    # Server / TLS
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 443
    SSL_CERTFILE: str = "server.crt"
    SSL_KEYFILE: str = "server.key"

    # Price simulation
    SIMULATOR_ENABLED: bool = True
    PRICE_UPDATE_INTERVAL: float = 5.0
    PRICE_MAX_DELTA: float = 0.05

    NEARBY_LIMIT: int = 3

    # Logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"


config = Config()
