"""Data models for processed PubMed papers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

UNKNOWN_DATE = "Unknown"


@dataclass
class PaperResult:
    """A paper with at least one author affiliated with a company."""

    pubmed_id: str
    title: str
    publication_date: str = UNKNOWN_DATE
    non_academic_authors: List[str] = field(default_factory=list)
    company_affiliations: List[str] = field(default_factory=list)
    corresponding_email: Optional[str] = None

    def __post_init__(self):
        if len(self.non_academic_authors) != len(self.company_affiliations):
            raise ValueError(
                f"Paper {self.pubmed_id}: {len(self.non_academic_authors)} authors "
                f"but {len(self.company_affiliations)} company affiliations"
            )


@dataclass
class SearchRecord:
    """Represents one logged search query."""

    id: int
    query: str
    timestamp: Optional[datetime]
