"""
Search PubMed for papers with pharmaceutical/biotech company authors.

This script:
1. Searches PubMed with the given query
2. Keeps papers with at least one author affiliated with a company
3. Stores the papers in the SQLite database (unless --no-store)
4. Writes the results as CSV to a file, or prints them to the console
"""

import logging
import sys
from pathlib import Path

#
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from finder.export import flatten_results, rows_to_csv_text, write_csv
from finder.sources.pubmed import fetch_papers, search_and_store


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Find PubMed papers with pharmaceutical/biotech company authors"
    )
    parser.add_argument(
        "query",
        help="PubMed query (full PubMed syntax is supported)"
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        help="CSV file to write results to. If not specified, prints to the console."
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Print debug information during execution"
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of PubMed records to fetch (default: PUBMED_MAX_RESULTS)"
    )
    parser.add_argument(
        "--no-store",
        action="store_true",
        help="Do not store results in the database"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Custom SQLite database path"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.no_store:
        papers, error = fetch_papers(args.query, args.max_results)
    else:
        papers, error = search_and_store(args.query, args.max_results, args.db)

    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if not papers:
        print("No papers with company-affiliated authors found.", file=sys.stderr)
        return 0

    if args.file:
        output = Path(args.file)
        summary = write_csv(papers, filename=output.name, export_dir=output.parent)
        print(f"Wrote {summary.record_count} rows for {len(papers)} papers to {summary.path}")
    else:
        sys.stdout.write(rows_to_csv_text(flatten_results(papers)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
