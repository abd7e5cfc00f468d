"""
Runtime Configuration

Reads service settings from environment variables once at import time.

Includes:
- Database URL and SQL echo flag
- Log directory and level
- Pagination defaults
- Orphan client compensation toggle
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".trip_booking"


def _env_bool(name: str, default: bool = False) -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name}={value}, using {default}")
        return default
    return value


def get_database_url() -> str:
    """
    Resolve the SQLAlchemy database URL.

    Defaults to a SQLite file in the per-user application directory.
    """
    url = os.environ.get('BOOKING_DATABASE_URL')
    if url:
        return url
    db_path = APP_DIR / "booking.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


DATABASE_URL = get_database_url()
DB_ECHO = _env_bool('BOOKING_DB_ECHO')

LOG_DIR = Path(os.environ.get('BOOKING_LOG_DIR', str(APP_DIR / "logs")))
LOG_LEVEL = os.environ.get('BOOKING_LOG_LEVEL', 'INFO').upper()

DEFAULT_PAGE_SIZE = _env_int('BOOKING_DEFAULT_PAGE_SIZE', 10)

# When enabled, a client created during an assignment request is deleted again
# if the assignment itself cannot be made.
DISCARD_ORPHAN_CLIENTS = _env_bool('BOOKING_DISCARD_ORPHAN_CLIENTS')

if DISCARD_ORPHAN_CLIENTS:
    logger.info("Orphan client compensation ENABLED")
else:
    logger.info("Orphan client compensation DISABLED (clients persist on failed assignment)")
