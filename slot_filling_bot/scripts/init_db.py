"""
Database Initializer.

Run this script to create the conversation state table in the database
configured by DATABASE_URL.

Usage:
    python -m slot_filling_bot.scripts.init_db
"""

import logging

from slot_filling_bot.config import settings
from slot_filling_bot.infrastructure.database.connection import engine, init_db

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    logger.info(f"Initializing database at {engine.url.render_as_string(hide_password=True)}")
    init_db(engine)
    logger.info(f"Tables ready (state backend: {settings.STATE_BACKEND}).")


if __name__ == "__main__":
    main()
