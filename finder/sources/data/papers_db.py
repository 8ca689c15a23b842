"""Database operations for paper and company-author storage."""

import sqlite3
from typing import List, Optional

from .models import PaperResult


def init_papers_tables(conn: sqlite3.Connection) -> None:
    """Create the papers and authors tables if they don't exist."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS papers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            pubmed_id TEXT UNIQUE NOT NULL,
            title TEXT NOT NULL,
            pub_date TEXT,
            search_id INTEGER,
            FOREIGN KEY (search_id) REFERENCES search_history(id)
        )
    """)
    conn.execute("""
        CREATE TABLE IF NOT EXISTS authors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            paper_id INTEGER NOT NULL,
            position INTEGER NOT NULL,
            name TEXT NOT NULL,
            company TEXT,
            email TEXT,
            FOREIGN KEY (paper_id) REFERENCES papers(id) ON DELETE CASCADE,
            UNIQUE(paper_id, position)
        )
    """)
    conn.execute("""
        CREATE INDEX IF NOT EXISTS idx_papers_search
        ON papers(search_id)
    """)
    conn.execute("""
        CREATE INDEX IF NOT EXISTS idx_authors_company
        ON authors(company)
    """)
    conn.commit()


def store_papers(
    conn: sqlite3.Connection,
    papers: List[PaperResult],
    search_id: Optional[int] = None
) -> int:
    """
    Store papers and their company-affiliated authors.

    Papers are upserted on pubmed_id and their author rows replaced, so
    storing the same paper twice leaves a single paper row.

    Args:
        conn: Database connection
        papers: List of PaperResult objects to store
        search_id: Optional search_history id the papers were found by

    Returns:
        Number of papers inserted/updated
    """
    cursor = conn.cursor()
    count = 0

    for paper in papers:
        cursor.execute("""
            INSERT INTO papers (pubmed_id, title, pub_date, search_id)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(pubmed_id) DO UPDATE SET
                title = excluded.title,
                pub_date = excluded.pub_date,
                search_id = COALESCE(excluded.search_id, papers.search_id)
        """, (
            paper.pubmed_id,
            paper.title,
            paper.publication_date,
            search_id
        ))

        paper_id = cursor.execute(
            "SELECT id FROM papers WHERE pubmed_id = ?", (paper.pubmed_id,)
        ).fetchone()["id"]

        cursor.execute("DELETE FROM authors WHERE paper_id = ?", (paper_id,))
        cursor.executemany("""
            INSERT INTO authors (paper_id, position, name, company, email)
            VALUES (?, ?, ?, ?, ?)
        """, [
            (paper_id, i, name, company or None, paper.corresponding_email)
            for i, (name, company) in enumerate(
                zip(paper.non_academic_authors, paper.company_affiliations)
            )
        ])
        count += 1

    conn.commit()
    return count


def _paper_from_row(conn: sqlite3.Connection, row: sqlite3.Row) -> PaperResult:
    authors = conn.execute("""
        SELECT name, company, email FROM authors
        WHERE paper_id = ?
        ORDER BY position
    """, (row["id"],)).fetchall()

    return PaperResult(
        pubmed_id=row["pubmed_id"],
        title=row["title"],
        publication_date=row["pub_date"],
        non_academic_authors=[a["name"] for a in authors],
        company_affiliations=[a["company"] or "" for a in authors],
        corresponding_email=authors[0]["email"] if authors else None
    )


def get_paper(conn: sqlite3.Connection, pubmed_id: str) -> Optional[PaperResult]:
    """Retrieve a stored paper by its PubMed id."""
    row = conn.execute(
        "SELECT * FROM papers WHERE pubmed_id = ?", (pubmed_id,)
    ).fetchone()
    if not row:
        return None
    return _paper_from_row(conn, row)


def get_papers_for_search(conn: sqlite3.Connection, search_id: int) -> List[PaperResult]:
    """Retrieve all papers last stored by the given search."""
    rows = conn.execute("""
        SELECT * FROM papers
        WHERE search_id = ?
        ORDER BY id
    """, (search_id,)).fetchall()
    return [_paper_from_row(conn, row) for row in rows]


def count_papers(conn: sqlite3.Connection) -> int:
    """Return the number of stored papers."""
    return conn.execute("SELECT COUNT(*) FROM papers").fetchone()[0]
