"""Database connection management for paper storage."""

import sqlite3
from pathlib import Path
from typing import Optional

from config.settings import settings


def get_db_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Get a connection to the SQLite database.

    Args:
        db_path: Optional custom database path. Uses settings.database_path if not provided.

    Returns:
        SQLite connection with Row factory and foreign keys enabled.
    """
    if db_path is None:
        db_path = settings.database_path

    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_database(db_path: Optional[Path] = None) -> None:
    """
    Initialize all database tables.

    Args:
        db_path: Optional custom database path.
    """
    from .papers_db import init_papers_tables
    from .search_history_db import init_search_history_table

    conn = get_db_connection(db_path)
    try:
        init_search_history_table(conn)
        init_papers_tables(conn)
    finally:
        conn.close()
