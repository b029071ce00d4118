"""
Free-text filtering of papers by title, authors and journal.
"""

from typing import Sequence

try:
    from models import Paper
except ImportError:
    from .models import Paper

SEARCH_FIELDS: tuple[str, ...] = ("title", "authors", "journal")


def normalize_query(query: str | None) -> str:
    """Strip surrounding whitespace and lowercase."""
    return (query or "").strip().lower()


def matches_query(paper: Paper, normalized_query: str) -> bool:
    """Check whether any searchable field contains an already-normalized query."""
    return any(
        normalized_query in getattr(paper, field).lower() for field in SEARCH_FIELDS
    )


def filter_papers(papers: Sequence[Paper], query: str | None) -> Sequence[Paper]:
    """
    Filter papers whose title, authors or journal contains the query.

    Matching is a case-insensitive substring test. Matches keep their input
    order and are not ranked.

    Args:
        papers: papers in source order
        query: free text typed by the user

    Returns:
        The input sequence itself when the query is blank, otherwise a new
        tuple with the matching papers.
    """
    normalized = normalize_query(query)
    if not normalized:
        return papers
    return tuple(paper for paper in papers if matches_query(paper, normalized))
