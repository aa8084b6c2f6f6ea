"""
Database initialization script.
Creates all tables, or applies the Alembic migrations with --migrate.
Run this as: python init_db.py [--migrate]
"""

import argparse
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

from app.core.config import settings
from app.db.init_db import create_all_tables, init_db

def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the Social Feed database")
    parser.add_argument("--migrate", action="store_true", help="Run Alembic migrations instead of create_all")
    args = parser.parse_args()

    logger.info(f"Initializing database at: {settings.DATABASE_URL}")
    if args.migrate:
        init_db()
        return 0
    if create_all_tables():
        logger.info("Database initialization completed successfully")
        return 0
    logger.error("Database initialization failed")
    return 1

if __name__ == "__main__":
    sys.exit(main())
