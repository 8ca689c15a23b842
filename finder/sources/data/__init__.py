"""Data storage module for processed PubMed papers."""

from .connection import get_db_connection, init_database
from .models import PaperResult, SearchRecord
from .papers_db import (
    init_papers_tables,
    store_papers,
    get_paper,
    get_papers_for_search,
    count_papers,
)
from .search_history_db import (
    init_search_history_table,
    log_search,
    get_recent_searches,
)

__all__ = [
    "get_db_connection",
    "init_database",
    "PaperResult",
    "SearchRecord",
    "init_papers_tables",
    "store_papers",
    "get_paper",
    "get_papers_for_search",
    "count_papers",
    "init_search_history_table",
    "log_search",
    "get_recent_searches",
]
