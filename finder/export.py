"""Flatten paper results into one row per company-affiliated author and write CSV."""

import csv
import io
import logging
from dataclasses import astuple, dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from config.settings import settings
from .sources.data.models import PaperResult

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "PubmedID",
    "Title",
    "Publication Date",
    "Non-academic Author(s)",
    "Company Affiliation(s)",
    "Corresponding Author Email",
]


@dataclass(frozen=True)
class ExportRow:
    """One exported (paper, non-academic author) pair."""
    pubmed_id: str
    title: str
    publication_date: str
    author: str
    company: str
    email: str

    def as_list(self) -> List[str]:
        return list(astuple(self))


@dataclass
class ExportSummary:
    """Where a CSV export was written and how many rows it holds."""
    filename: str
    path: Path
    record_count: int


def flatten_results(papers: Iterable[PaperResult]) -> List[ExportRow]:
    """
    Produce one row per non-academic author, repeating the paper fields.

    A paper with no non-academic authors still yields a single row with
    empty author and company columns.
    """
    rows = []
    for paper in papers:
        email = paper.corresponding_email or ""
        pairs = list(zip(paper.non_academic_authors, paper.company_affiliations))
        if not pairs:
            pairs = [("", "")]

        for author, company in pairs:
            rows.append(ExportRow(
                pubmed_id=paper.pubmed_id,
                title=paper.title,
                publication_date=paper.publication_date,
                author=author,
                company=company or "",
                email=email,
            ))
    return rows


def _write_rows(handle, rows: Iterable[ExportRow]) -> None:
    writer = csv.writer(handle)
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(row.as_list())


def rows_to_csv_text(rows: Iterable[ExportRow]) -> str:
    """Serialize export rows, header first, to CSV text."""
    buffer = io.StringIO()
    _write_rows(buffer, rows)
    return buffer.getvalue()


def default_export_filename() -> str:
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    return f"pubmed_papers_{timestamp}.csv"


def write_csv(
    papers: List[PaperResult],
    filename: Optional[str] = None,
    export_dir: Optional[Path] = None
) -> ExportSummary:
    """
    Write papers to a CSV file.

    Args:
        papers: Papers to export
        filename: Output file name (defaults to a timestamped name)
        export_dir: Output directory (defaults to settings.export_path)

    Returns:
        ExportSummary describing the written file

    Raises:
        ValueError: If no papers are given.
    """
    if not papers:
        raise ValueError("No papers provided for CSV generation")

    export_dir = Path(export_dir) if export_dir is not None else settings.export_path
    export_dir.mkdir(parents=True, exist_ok=True)
    filename = filename or default_export_filename()
    output_path = export_dir / filename

    rows = flatten_results(papers)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        _write_rows(f, rows)

    logger.info(f"Wrote {len(rows)} rows to {output_path}")
    return ExportSummary(filename=filename, path=output_path, record_count=len(rows))
