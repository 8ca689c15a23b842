"""Build author records from parsed PubMed author entries."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

UNKNOWN_AUTHOR = "Unknown Author"


@dataclass(frozen=True)
class AuthorRecord:
    """Display name and affiliation strings for one author."""
    display_name: str
    affiliations: Tuple[str, ...] = ()


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def resolve_author_name(author: Mapping) -> str:
    """
    Resolve a display name for an author entry.

    Precedence: "Last Fore", "Last Initials", collective name, last name,
    then "Unknown Author".
    """
    last_name = _text(author.get("last_name"))
    fore_name = _text(author.get("fore_name"))
    initials = _text(author.get("initials"))
    collective_name = _text(author.get("collective_name"))

    if last_name and fore_name:
        return f"{last_name} {fore_name}"
    elif last_name and initials:
        return f"{last_name} {initials}"
    elif collective_name:
        return collective_name
    return last_name or UNKNOWN_AUTHOR


def _affiliation_text(entry: Any) -> Optional[str]:
    if isinstance(entry, Mapping):
        entry = entry.get("affiliation")
    text = _text(entry)
    return text or None


def resolve_affiliations(affiliation_info: Any) -> Tuple[str, ...]:
    """
    Flatten an affiliation container into a tuple of strings.

    The container may be missing, a single string, a single
    {"affiliation": ...} mapping (whose value may itself be a list), or a
    list of strings/mappings. Empty entries are dropped.
    """
    if affiliation_info is None:
        return ()

    if isinstance(affiliation_info, Mapping):
        inner = affiliation_info.get("affiliation")
        if isinstance(inner, (list, tuple)):
            entries = list(inner)
        else:
            entries = [inner]
    elif isinstance(affiliation_info, (list, tuple)):
        entries = []
        for item in affiliation_info:
            inner = item.get("affiliation") if isinstance(item, Mapping) else item
            if isinstance(inner, (list, tuple)):
                entries.extend(inner)
            else:
                entries.append(inner)
    else:
        entries = [affiliation_info]

    return tuple(
        text for text in (_affiliation_text(entry) for entry in entries) if text
    )


def build_author_record(author: Mapping) -> AuthorRecord:
    """Build an AuthorRecord from one parsed author entry."""
    return AuthorRecord(
        display_name=resolve_author_name(author),
        affiliations=resolve_affiliations(author.get("affiliation_info")),
    )
