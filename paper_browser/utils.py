import os
import pandas as pd

try:
    from models import PAPER_COLUMNS, Paper
    from pagination import Page
except ImportError:
    from .models import PAPER_COLUMNS, Paper
    from .pagination import Page

# Columns shown in the terminal table, in display order
TABLE_COLUMNS = ["PublishedDate", "Journal", "Title", "Authors"]


def papers_to_dataframe(papers: list[Paper] | tuple[Paper, ...] | Paper) -> pd.DataFrame:
    """
    Convert Paper object(s) to a pandas DataFrame.

    Args:
        papers: Single Paper object or a sequence of Paper objects

    Returns:
        DataFrame with one column per spreadsheet column, in sheet order
    """
    if isinstance(papers, Paper):
        papers = [papers]

    return pd.DataFrame(
        [paper.to_row() for paper in papers], columns=list(PAPER_COLUMNS)
    )


def render_page(page: Page, max_colwidth: int = 60) -> str:
    """Render a page of papers as a plain-text table numbered from the page offset."""
    if not page.items:
        return ""

    df = papers_to_dataframe(page.items)[TABLE_COLUMNS]
    df.index = range(page.start_index + 1, page.start_index + 1 + len(df))
    return df.to_string(max_colwidth=max_colwidth)


def export_papers_csv(papers: list[Paper] | tuple[Paper, ...], path: str) -> str:
    """Write papers to a CSV file with the original spreadsheet header."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    papers_to_dataframe(papers).to_csv(path, index=False, encoding="utf-8")
    return path
