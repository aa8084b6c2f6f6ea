import logging

from alembic.config import Config
from alembic import command
from sqlalchemy import inspect

from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)

def init_db(config_path: str = "alembic.ini") -> None:
    """
    Initialize the database by running Alembic migrations.
    """
    try:
        alembic_cfg = Config(config_path)
        command.upgrade(alembic_cfg, "head")
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise

def create_all_tables() -> bool:
    try:
        existing_tables = set(inspect(engine).get_table_names())

        Base.metadata.create_all(bind=engine)

        new_tables = set(inspect(engine).get_table_names()) - existing_tables
        if new_tables:
            logger.info(f"Created new tables: {sorted(new_tables)}")

        return True
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        return False
