"""Configuration settings for the PubMed company-affiliation finder.

Handles NCBI credentials, request limits, storage paths and keyword overrides.
"""

import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from pydantic import BaseModel

from config.keywords import ACADEMIC_KEYWORDS, COMMERCIAL_KEYWORDS

load_dotenv()

# Project root directory
ROOT_DIR = Path(__file__).parent.parent


def _keywords_from_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Read a comma-separated keyword list, falling back to the defaults."""
    raw = os.getenv(name, "")
    keywords = tuple(k.strip() for k in raw.split(",") if k.strip())
    return keywords or default


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # NCBI E-utilities
    ncbi_api_key: str = os.getenv("NCBI_API_KEY", "")
    ncbi_email: str = os.getenv("NCBI_EMAIL", "")
    ncbi_tool: str = os.getenv("NCBI_TOOL", "pubmed-company-finder")
    pubmed_max_results: int = int(os.getenv("PUBMED_MAX_RESULTS", "100"))
    request_timeout: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

    # Storage paths
    database_path: Path = ROOT_DIR / os.getenv("DATABASE_PATH", "data/database.sqlite")
    export_path: Path = ROOT_DIR / os.getenv("EXPORT_PATH", "data/exports")

    # Affiliation keywords
    academic_keywords: Tuple[str, ...] = _keywords_from_env("ACADEMIC_KEYWORDS", ACADEMIC_KEYWORDS)
    commercial_keywords: Tuple[str, ...] = _keywords_from_env("COMMERCIAL_KEYWORDS", COMMERCIAL_KEYWORDS)

    class Config:
        arbitrary_types_allowed = True


settings = Settings()
