"""
Shared fixtures for paper browser tests.
"""

import pytest

from paper_browser.models import PAPER_COLUMNS, Paper

HEADER = ",".join(PAPER_COLUMNS)


def make_paper(i: int, **overrides) -> Paper:
    values = dict(
        journal=f"Journal {i}",
        organization=f"Organization {i}",
        published_date=f"2024-01-{i % 28 + 1:02d}",
        authors=f"Author {i}",
        title=f"Title {i}",
        title_url=f"https://example.org/title/{i}",
        pdf_url=f"https://example.org/pdf/{i}.pdf",
        vol_url=f"https://example.org/vol/{i}",
        vol_title=f"Volume {i}",
    )
    values.update(overrides)
    return Paper(**values)


def make_row(i: int) -> str:
    return ",".join(make_paper(i).to_row().values())


@pytest.fixture
def sample_papers():
    """Three papers with distinct journals, authors and titles."""
    return (
        make_paper(
            1,
            journal="Vietnam Medical Journal",
            authors="Nguyen Van A, Tran Thi B",
            title="Hypertension in rural Vietnam",
        ),
        make_paper(
            2,
            journal="Journal of Pediatrics",
            authors="Smith, J.",
            title="Childhood asthma outcomes",
        ),
        make_paper(
            3,
            journal="Public Health Reports",
            authors="Le Van C",
            title="Tuberculosis screening in Hanoi",
        ),
    )


@pytest.fixture
def sheet_csv():
    """Build a CSV document with the paper header and ``n`` generated rows."""

    def _build(n: int) -> str:
        return "\n".join([HEADER] + [make_row(i) for i in range(1, n + 1)]) + "\n"

    return _build
