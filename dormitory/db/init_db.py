"""Database initialization utilities."""
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from dormitory.core.logging import get_logger
from dormitory.db.base import Base, import_models
from dormitory.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """
    Create any missing tables.

    Suitable for development and tests; production schemas should be
    managed with migrations.
    """
    import_models()

    existing_tables = set(inspect(engine).get_table_names())
    missing = [t for t in Base.metadata.sorted_tables if t.name not in existing_tables]

    if missing:
        Base.metadata.create_all(bind=engine, tables=missing)
        logger.info(f"Created {len(missing)} database tables")
    else:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")


def drop_db(engine: Engine = default_engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data!
    """
    import_models()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")


def reset_db(engine: Engine = default_engine) -> None:
    """Drop and recreate all tables."""
    logger.warning("Resetting database...")
    drop_db(engine)
    init_db(engine)
    logger.info("Database reset complete")
