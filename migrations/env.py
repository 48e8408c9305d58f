"""Alembic environment for the Neoping feed schema.

``alembic.ini`` puts ``src/`` on the path. The target URL comes from
``ALEMBIC_URL`` when set, otherwise from the service's own settings, so
migrations and the app always agree on the database.
"""
from __future__ import annotations

import logging
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from neoping_feed.core.settings import settings
from neoping_feed.db.session import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")
target_metadata = Base.metadata


def migration_url() -> str:
    """Return the database URL migrations should run against."""
    return os.getenv("ALEMBIC_URL") or settings.database_url_sync


def run_migrations_offline() -> None:
    """Emit SQL for the pending revisions without connecting."""
    url = migration_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the pending revisions over a live connection."""
    url = migration_url()
    logger.info("Running migrations against %s", url.split("@")[-1])
    connectable = create_engine(url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables.
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
