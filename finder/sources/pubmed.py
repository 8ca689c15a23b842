"""
Search PubMed for papers with company-affiliated authors and store them in SQLite.

This module provides functions to query the NCBI E-utilities API, reduce the
returned records to papers with at least one non-academic author, and store
them in a local SQLite database.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import requests

from config.settings import settings
from ..affiliations import KeywordConfig
from ..papers import process_records
from .data import (
    PaperResult,
    get_db_connection,
    init_database,
    log_search,
    store_papers,
)
from .pubmed_xml import parse_pubmed_xml

logger = logging.getLogger(__name__)

EUTILS_BASE_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_URL = f"{EUTILS_BASE_URL}/esearch.fcgi"
EFETCH_URL = f"{EUTILS_BASE_URL}/efetch.fcgi"


def _common_params() -> dict:
    params = {"db": "pubmed"}
    if settings.ncbi_api_key:
        params["api_key"] = settings.ncbi_api_key
    if settings.ncbi_email:
        params["email"] = settings.ncbi_email
    if settings.ncbi_tool:
        params["tool"] = settings.ncbi_tool
    return params


def _describe_error(e: Exception) -> str:
    if isinstance(e, requests.exceptions.Timeout):
        return "Request timed out while querying PubMed"
    if isinstance(e, requests.exceptions.HTTPError):
        if e.response is not None and e.response.status_code == 429:
            return "Rate limit exceeded. Try again later or use an NCBI API key."
        status = e.response.status_code if e.response is not None else "unknown"
        return f"HTTP error: {status}"
    return f"Network error: {str(e)}"


def search_pubmed_ids(query: str, max_results: Optional[int] = None) -> Tuple[List[str], Optional[str]]:
    """
    Search PubMed and return matching PubMed ids, most relevant first.

    Args:
        query: PubMed query string (full PubMed syntax is supported)
        max_results: Maximum number of ids (defaults to settings.pubmed_max_results)

    Returns:
        Tuple of (list of ids, error message if any)
    """
    params = _common_params()
    params.update({
        "term": query,
        "retmax": max_results or settings.pubmed_max_results,
        "retmode": "json",
        "sort": "relevance",
    })

    try:
        resp = requests.get(ESEARCH_URL, params=params, timeout=settings.request_timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.exceptions.RequestException as e:
        return [], _describe_error(e)
    except ValueError:
        return [], "PubMed search returned invalid JSON"

    ids = data.get("esearchresult", {}).get("idlist") or []
    logger.info(f"PubMed search '{query}' returned {len(ids)} ids")
    return ids, None


def fetch_pubmed_xml(pubmed_ids: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Fetch full records for the given ids as PubmedArticleSet XML.

    Returns:
        Tuple of (xml text, error message if any)
    """
    params = _common_params()
    params.update({
        "id": ",".join(pubmed_ids),
        "retmode": "xml",
        "rettype": "abstract",
    })

    try:
        # POST keeps long id lists out of the URL
        resp = requests.post(EFETCH_URL, data=params, timeout=settings.request_timeout)
        resp.raise_for_status()
        return resp.text, None
    except requests.exceptions.RequestException as e:
        return None, _describe_error(e)


def fetch_papers(
    query: str,
    max_results: Optional[int] = None,
    keywords: Optional[KeywordConfig] = None
) -> Tuple[List[PaperResult], Optional[str]]:
    """
    Search PubMed and keep the papers that have company-affiliated authors.

    Returns:
        Tuple of (list of PaperResult objects, error message if any)
    """
    try:
        ids, error = search_pubmed_ids(query, max_results)
        if error:
            return [], error
        if not ids:
            return [], None

        xml_text, error = fetch_pubmed_xml(ids)
        if error:
            return [], error

        records = parse_pubmed_xml(xml_text)
        return process_records(records, keywords or KeywordConfig.from_settings()), None

    except Exception as e:
        logger.exception("Unexpected error fetching PubMed papers")
        return [], f"Unexpected error: {str(e)}"


def search_and_store(
    query: str,
    max_results: Optional[int] = None,
    db_path: Optional[Path] = None,
    keywords: Optional[KeywordConfig] = None
) -> Tuple[List[PaperResult], Optional[str]]:
    """
    Log a search, fetch matching papers and store them in the database.

    Returns:
        Tuple of (list of stored PaperResult objects, error message if any)
    """
    init_database(db_path)
    conn = get_db_connection(db_path)
    try:
        search_id = log_search(conn, query)

        papers, error = fetch_papers(query, max_results, keywords)
        if error:
            return [], error

        count = store_papers(conn, papers, search_id)
        logger.info(f"Stored {count} papers for '{query}'")
        return papers, None
    finally:
        conn.close()
