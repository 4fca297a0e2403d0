"""
Database connection utilities for the irrigation planner.

Saved calculator profiles live in a local SQLite file (WAL mode). The
reference tables and the runtime calculator never touch the database.
"""

import sqlite3
import logging
from contextlib import contextmanager

from config import Config

logger = logging.getLogger(__name__)

PLANNER_DB = Config.PLANNER_DB


def _open(db_path):
    conn = sqlite3.connect(db_path)
    conn.execute('PRAGMA journal_mode=WAL')
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db(db_path=None):
    """
    Context manager for database connections.

    Usage:
        with get_db() as conn:
            conn.execute('SELECT ...')

    Commits on success, rolls back and re-raises on error, always closes.

    Args:
        db_path: Path to the SQLite database. Defaults to PLANNER_DB.
    """
    conn = _open(db_path or PLANNER_DB)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
