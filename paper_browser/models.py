"""
Record model for one row of the published paper spreadsheet.
"""

from dataclasses import dataclass
from typing import Mapping

# Spreadsheet header name -> Paper attribute, in sheet order
COLUMN_TO_FIELD: dict[str, str] = {
    "Journal": "journal",
    "Organization": "organization",
    "PublishedDate": "published_date",
    "Authors": "authors",
    "Title": "title",
    "TitleURL": "title_url",
    "PdfURL": "pdf_url",
    "VolURL": "vol_url",
    "VolTitle": "vol_title",
}
PAPER_COLUMNS: tuple[str, ...] = tuple(COLUMN_TO_FIELD)


@dataclass(frozen=True)
class Paper:
    """Represents one paper listed in the spreadsheet."""

    journal: str
    organization: str
    published_date: str
    authors: str
    title: str
    title_url: str
    pdf_url: str
    vol_url: str
    vol_title: str

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "Paper":
        """
        Build a paper from a header-name to value mapping.

        Args:
            row: mapping keyed by spreadsheet column name; unknown columns are ignored

        Returns:
            Paper with every field taken from the matching column.
        """
        return cls(
            **{attr: row[column] for column, attr in COLUMN_TO_FIELD.items()}
        )

    def to_row(self) -> dict[str, str]:
        """Return the paper keyed by spreadsheet column name."""
        return {
            column: getattr(self, attr) for column, attr in COLUMN_TO_FIELD.items()
        }
