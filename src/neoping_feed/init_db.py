"""Create all tables on the configured database without running migrations."""

import logging

from neoping_feed.core.settings import settings
from neoping_feed.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Tables created on %s", settings.effective_database_url)


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    init_db()
