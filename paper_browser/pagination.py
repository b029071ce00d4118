"""
Page slicing for filtered paper lists.
"""

import math
from dataclasses import dataclass
from typing import Sequence

try:
    from models import Paper
except ImportError:
    from .models import Paper


@dataclass(frozen=True)
class Page:
    """One page of results."""

    items: tuple[Paper, ...]
    page_number: int
    page_size: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def start_index(self) -> int:
        """Zero-based offset of the first item on this page."""
        return (self.page_number - 1) * self.page_size


def _check_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def total_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed for ``total_items``; 0 when there are none."""
    _check_positive("page_size", page_size)
    return math.ceil(total_items / page_size)


def paginate(papers: Sequence[Paper], page_size: int, page_number: int) -> Page:
    """
    Slice out one page of papers.

    Page numbers start at 1. A page number past the last page gives an empty
    page; the page number is never corrected here.

    Args:
        papers: the filtered papers
        page_size: papers per page
        page_number: 1-indexed page to return

    Returns:
        Page with the slice and the total page count.
    """
    _check_positive("page_size", page_size)
    _check_positive("page_number", page_number)

    start = (page_number - 1) * page_size
    return Page(
        items=tuple(papers[start : start + page_size]),
        page_number=page_number,
        page_size=page_size,
        total_pages=total_pages(len(papers), page_size),
        total_items=len(papers),
    )
