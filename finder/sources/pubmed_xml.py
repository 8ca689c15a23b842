"""Parse PubMed efetch XML into plain record dicts."""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def _child_text(parent, name: str) -> Optional[str]:
    """Return the stripped text of a direct child element, or None."""
    if parent is None:
        return None
    tag = parent.find(name, recursive=False)
    if tag is None:
        return None
    # Inline markup (<sub>, <i>) must not introduce spaces
    text = " ".join(tag.get_text().split())
    return text or None


def parse_author(author) -> dict:
    """Parse an <Author> element."""
    affiliations = []
    for info in author.find_all("AffiliationInfo", recursive=False):
        text = _child_text(info, "Affiliation")
        if text:
            affiliations.append({"affiliation": text})

    return {
        "last_name": _child_text(author, "LastName"),
        "fore_name": _child_text(author, "ForeName"),
        "initials": _child_text(author, "Initials"),
        "collective_name": _child_text(author, "CollectiveName"),
        "affiliation_info": affiliations or None,
    }


def parse_history(pubmed_data) -> list:
    """Parse the <PubMedPubDate> entries of a <PubmedData> element."""
    if pubmed_data is None:
        return []
    history = pubmed_data.find("History", recursive=False)
    if history is None:
        return []

    return [
        {
            "status": date.get("PubStatus"),
            "year": _child_text(date, "Year"),
            "month": _child_text(date, "Month"),
            "day": _child_text(date, "Day"),
        }
        for date in history.find_all("PubMedPubDate", recursive=False)
    ]


def parse_article(pubmed_article) -> Optional[dict]:
    """
    Parse one <PubmedArticle> element.

    Returns:
        Record dict with pubmed_id, title, authors and publication_history,
        or None if the citation has no <Article>.
    """
    citation = pubmed_article.find("MedlineCitation", recursive=False)
    if citation is None:
        return None

    article = citation.find("Article", recursive=False)
    if article is None:
        return None

    author_list = article.find("AuthorList", recursive=False)
    authors = None
    if author_list is not None:
        authors = [parse_author(a) for a in author_list.find_all("Author", recursive=False)]

    return {
        "pubmed_id": _child_text(citation, "PMID") or "",
        "title": _child_text(article, "ArticleTitle") or "",
        "authors": authors,
        "publication_history": parse_history(
            pubmed_article.find("PubmedData", recursive=False)
        ),
    }


def parse_pubmed_xml(xml_text: str) -> List[dict]:
    """
    Parse a PubmedArticleSet document into record dicts.

    Args:
        xml_text: efetch response body (retmode=xml)

    Returns:
        List of record dicts, in document order
    """
    if not xml_text or not xml_text.strip():
        return []

    soup = BeautifulSoup(xml_text, "xml")
    records = []
    for pubmed_article in soup.find_all("PubmedArticle"):
        record = parse_article(pubmed_article)
        if record is None:
            logger.debug("Skipping PubmedArticle without an Article element")
            continue
        records.append(record)

    logger.debug(f"Parsed {len(records)} PubMed records")
    return records
