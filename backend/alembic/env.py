"""
Alembic Migration Environment
===============================

What:  Runs migrations against the database described by bioskop_api.config.
How:   Online mode uses an async engine (asyncpg) and bridges into Alembic's
       sync API with `connection.run_sync()`. Offline mode emits SQL only.
Who:   `alembic upgrade head` and friends, run from the backend/ directory.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from bioskop_api.config import settings
from bioskop_api.database import Base

# Models must be imported to register with Base.metadata for --autogenerate
from bioskop_api.models.bioskop import Bioskop  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Settings are the single source of the URL; "%" is configparser's escape char
config.set_main_option("sqlalchemy.url", settings.sqlalchemy_url.replace("%", "%%"))


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Connect with a throwaway NullPool engine and apply pending revisions.

    The asyncpg ssl argument is taken from the same settings the service uses.
    """
    connect_args = settings.engine_options().get("connect_args", {})
    connectable = create_async_engine(
        settings.sqlalchemy_url,
        poolclass=pool.NullPool,
        connect_args=connect_args,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
