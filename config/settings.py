from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from src.dex_common.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: no default, MUST be set in the environment or .env
    DATABASE_URL: str

    # Pool / driver
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_CONNECT_TIMEOUT: float = 10.0
    DB_COMMAND_TIMEOUT: float = 30.0

    # App
    DEBUG: bool = False  # echo SQL when True

    @field_validator("DATABASE_URL")
    @classmethod
    def database_url_parses(cls, v: str) -> str:
        # Never echo the URL back: it may carry a password.
        try:
            url = make_url(v)
        except ArgumentError as exc:
            raise ValueError("DATABASE_URL is not a valid database URL") from exc
        if not url.drivername.startswith("postgresql"):
            raise ValueError("DATABASE_URL must point at a PostgreSQL database")
        return v


def load_settings(**overrides: object) -> Settings:
    """Build Settings from the environment, failing fast on bad configuration."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise ConfigurationError(f"Invalid configuration: {fields or 'unknown field'}") from exc
