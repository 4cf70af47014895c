# client_api/adapters/configuration/config.py

from typing import Optional
from logging import getLevelName
from pydantic import Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Service identity, used to build resource locations
    APP_NAME: str = "client-service"
    SERVER_PORT: str = "8080"

    # Database
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = 5432
    SQLITE_PATH: str = "./clients.db"
    DB_ECHO: bool = False
    DATABASE_URL: Optional[str] = Field(None, validate_default=True)

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        if data.get("POSTGRES_HOST"):
            return (
                f"postgresql+asyncpg://{data.get('POSTGRES_USER')}:{data.get('POSTGRES_PASSWORD')}"
                f"@{data['POSTGRES_HOST']}:{data.get('POSTGRES_PORT')}/{data.get('POSTGRES_DB')}"
            )
        return f"sqlite+aiosqlite:///{data.get('SQLITE_PATH')}"

    @field_validator("SERVER_PORT", mode="before")
    def coerce_server_port(cls, v) -> str:
        """Accepts the port as a number or string, stored as string."""
        return str(v).strip()

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Makes sure the value is a known logging level."""
        lvl = str(v).upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
