from database import engine, Base
from sqlalchemy import inspect, text
import models  # noqa: F401  (registers tables on Base.metadata)
import logging

logger = logging.getLogger(__name__)


def _index_exists(inspector, table: str, index: str) -> bool:
    """Check if an index exists on a table"""
    try:
        return any(ix['name'] == index for ix in inspector.get_indexes(table))
    except Exception:
        return False


def _add_unique_index_if_missing(inspector, table: str, index: str, columns: str) -> bool:
    """Create a unique index on a table if it doesn't exist"""
    if _index_exists(inspector, table, index):
        return False
    logger.info(f"Running migration: Adding unique index '{index}' on {table}({columns})...")
    with engine.connect() as conn:
        conn.execute(text(f"CREATE UNIQUE INDEX {index} ON {table} ({columns})"))
        conn.commit()
    logger.info(f"Migration complete: '{index}' added to {table}")
    return True


def _run_essential_migrations() -> int:
    """
    Bring databases created by older schema versions up to date.

    Databases that predate the unique PESEL index allowed duplicate clients
    under concurrent registration; the index is added here. Creation fails
    (and is logged) if duplicates already exist.
    """
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    migrations_run = 0

    if 'client' in tables:
        if _add_unique_index_if_missing(inspector, 'client', 'uq_client_pesel', 'pesel'):
            migrations_run += 1

    if migrations_run > 0:
        logger.info(f"Database schema updated: {migrations_run} migration(s) applied")
    else:
        logger.debug("Database schema is up to date")

    return migrations_run


def init_database():
    """Create all tables and apply essential migrations"""
    Base.metadata.create_all(bind=engine)

    try:
        _run_essential_migrations()
    except Exception as e:
        logger.warning(f"Migration warning (non-fatal): {e}")

    logger.info(f"Database initialized: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    init_database()
