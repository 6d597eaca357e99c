"""HRM settings, read from the environment and an optional .env file.

The first existing file wins:

- ``$HRM_ENV_FILE`` (absolute, or relative to the project root)
- ``config/.env.dev`` for local runs
- ``config/.env`` for deployments

Variables set in the process environment always override the file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ROOT_MARKERS = ("config", "pyproject.toml")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for directory in here.parents:
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return here.parents[2]


def _env_file() -> Path | None:
    root = _project_root()
    candidates: list[Path] = []

    explicit = os.environ.get("HRM_ENV_FILE")
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else root / path)

    candidates += [root / "config" / ".env.dev", root / "config" / ".env"]
    return next((c for c in candidates if c.is_file()), None)


class Settings(BaseSettings):
    """Runtime configuration of the HRM backend.

    Field names map to upper-cased environment variables
    (``jwt_secret_key`` reads ``JWT_SECRET_KEY``).
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required, no defaults
    jwt_secret_key: SecretStr  # HS256 signing key
    postgres_password: SecretStr

    # Application
    app_name: str = "HRM"
    debug: bool = False

    # PostgreSQL connection
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "hrm"

    # Explicit URL wins over the POSTGRES_* components (e.g. sqlite for demos)
    database_url_override: str | None = None

    # Every store call is bounded by this timeout
    store_timeout_seconds: float = 5.0

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_cors_origins: str = ""  # comma-separated; empty disables CORS

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Accept a list as well as a comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # JWT
    jwt_token_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = 12

    # Root level of the hrm loggers
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """The override if set, else an asyncpg URL built from POSTGRES_*."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Required fields (jwt_secret_key, postgres_password) must be provided
    via environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
