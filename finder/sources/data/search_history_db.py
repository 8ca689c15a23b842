"""Database operations for the search history log."""

import sqlite3
from datetime import datetime
from typing import List

from .models import SearchRecord


def init_search_history_table(conn: sqlite3.Connection) -> None:
    """Create the search_history table if it doesn't exist."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS search_history (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            query TEXT NOT NULL,
            timestamp TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()


def log_search(conn: sqlite3.Connection, query: str) -> int:
    """
    Record a search query.

    Returns:
        The id of the new search_history row.
    """
    cursor = conn.execute(
        "INSERT INTO search_history (query, timestamp) VALUES (?, ?)",
        (query, datetime.now().isoformat())
    )
    conn.commit()
    return cursor.lastrowid


def get_recent_searches(conn: sqlite3.Connection, limit: int = 20) -> List[SearchRecord]:
    """Retrieve the most recent searches, newest first."""
    cursor = conn.execute("""
        SELECT id, query, timestamp
        FROM search_history
        ORDER BY id DESC
        LIMIT ?
    """, (limit,))

    return [
        SearchRecord(
            id=row["id"],
            query=row["query"],
            timestamp=datetime.fromisoformat(row["timestamp"]) if row["timestamp"] else None
        )
        for row in cursor.fetchall()
    ]
