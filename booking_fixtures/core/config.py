"""Application configuration with environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    ENV: str = "dev"
    VERSION: str = "0.1.0"

    # Database
    DATABASE_URL: str
    SQL_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # Fixture defaults
    DEFAULT_WORKER_NAME: str = "69"  # Partition key when no worker index is supplied
    DEFAULT_EMAIL_DOMAIN: str = "example.com"
    PASSWORD_HASH_ROUNDS: int = 12  # bcrypt cost factor

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
