"""
Bioskop API: Application Configuration
=======================================

What:  Centralized configuration using Pydantic Settings.
How:   Values come from environment variables (and a `.env` file outside of
       Railway deployments), are validated on load, and are exposed through
       the module-level `settings` object.
Who:   Imported by the application factory, the database layer and Alembic.

Connection settings follow the libpq variable names (PGHOST, PGPORT, PGUSER,
PGPASSWORD, PGDATABASE) so the same environment works for `psql` and for the
service. DATABASE_URL, when set, replaces the assembled URL entirely.
"""

import os
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern. Defaults target local development;
    deployments override at least the PG* credentials.
    """

    # ── Database ──────────────────────────────────────────────────────────
    pghost: str = Field(default="localhost")
    pgport: int = Field(default=5432, ge=1, le=65535)
    pguser: str = Field(default="postgres")
    pgpassword: str = Field(default="")
    pgdatabase: str = Field(default="bioskop")

    # Passed to asyncpg as its `ssl` argument ("disable" sends nothing)
    pgsslmode: str = Field(default="require")

    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the PG* settings when set",
    )

    # Pool sizing only applies to PostgreSQL; SQLite uses its own pool class
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("pgsslmode")
    @classmethod
    def validate_sslmode(cls, v: str) -> str:
        valid_modes = {"disable", "allow", "prefer", "require", "verify-ca", "verify-full"}
        lower = v.lower()
        if lower not in valid_modes:
            raise ValueError(f"Invalid pgsslmode '{v}'. Must be one of: {valid_modes}")
        return lower

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PGHOST and pghost both work
        "extra": "ignore",
    }

    @property
    def sqlalchemy_url(self) -> str:
        """
        What:  The URL handed to `create_async_engine`.
        How:   DATABASE_URL verbatim if set, otherwise an asyncpg URL built
               from the PG* parts with `URL.create` (handles quoting of
               passwords containing reserved characters).
        """
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername="postgresql+asyncpg",
            username=self.pguser,
            password=self.pgpassword or None,
            host=self.pghost,
            port=self.pgport,
            database=self.pgdatabase,
        )
        return url.render_as_string(hide_password=False)

    @property
    def is_postgres(self) -> bool:
        return self.sqlalchemy_url.startswith("postgresql")

    def engine_options(self) -> Dict[str, Any]:
        """
        Keyword arguments for `create_async_engine` derived from these settings.

        Pool sizing and the asyncpg ssl argument are only emitted for
        PostgreSQL URLs; SQLite rejects them.
        """
        options: Dict[str, Any] = {"echo": self.log_level == "DEBUG"}
        if self.is_postgres:
            options.update(
                pool_size=self.db_pool_size,
                max_overflow=self.db_max_overflow,
                pool_pre_ping=self.db_pool_pre_ping,
                pool_recycle=3600,
            )
            if self.pgsslmode != "disable":
                options["connect_args"] = {"ssl": self.pgsslmode}
        return options


def load_settings() -> Settings:
    """
    Build a Settings instance, reading `.env` unless running on Railway.

    Railway injects every variable into the process environment, so a stray
    `.env` shipped with the image must not shadow them.
    """
    if "RAILWAY_ENVIRONMENT" in os.environ:
        return Settings(_env_file=None)
    return Settings()


# Singleton instance, imported throughout the application
settings = load_settings()
