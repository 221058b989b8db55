# jobboard/migrations/env.py
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# -------------------------------------------------------------------
# Import the SAME Base the models subclass. jobboard.config also loads
# jobboard/.env (or .env), so DATABASE_URL set there is visible here.
# -------------------------------------------------------------------
from jobboard import config as app_config
from jobboard.database import Base

# IMPORTANT: Import models so tables register on Base.metadata
# (Side-effect import — do not remove)
import jobboard.models  # noqa: F401

# Alembic Config object, provides access to values in alembic.ini
config = context.config

# ALEMBIC_DATABASE_URL, then alembic.ini, then DATABASE_URL / DB_CONNECT via jobboard.config
env_url = (
    os.getenv("ALEMBIC_DATABASE_URL")
    or config.get_main_option("sqlalchemy.url")
    or app_config.default_database_url()
)
config.set_main_option("sqlalchemy.url", env_url)

# Logging configuration
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Metadata for ‘--autogenerate’
target_metadata = Base.metadata

# Enable batch mode automatically for SQLite (schema changes)
is_sqlite = env_url.startswith("sqlite")


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (no DB connection)."""
    context.configure(
        url=env_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=is_sqlite,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (with DB connection)."""
    section = config.get_section(config.config_ini_section) or {}
    connectable = engine_from_config(
        section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=is_sqlite,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
