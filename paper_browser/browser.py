"""
Application state for browsing the paper spreadsheet.

PaperBrowser owns the loaded papers, the current query and the current page.
Filtering and paging are recomputed from that state on demand.
"""

import logging
from enum import Enum
from typing import Sequence

try:
    from config import BrowserConfig
    from errors import PaperBrowserError
    from models import Paper
    from pagination import Page, paginate
    from query import filter_papers
    from sheet_loader import SheetLoader
except ImportError:
    from .config import BrowserConfig
    from .errors import PaperBrowserError
    from .models import Paper
    from .pagination import Page, paginate
    from .query import filter_papers
    from .sheet_loader import SheetLoader

logger = logging.getLogger(__name__)


class LoadState(Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class PaperBrowser:
    """Holds the loaded papers plus the search and paging state."""

    def __init__(self, config: BrowserConfig, loader: SheetLoader | None = None):
        self.config = config
        self.loader = loader or SheetLoader(config)

        self.papers: tuple[Paper, ...] = ()
        self.state = LoadState.LOADING
        self.error: str | None = None
        self.query = ""
        self.page_number = 1

    async def load(self) -> bool:
        """
        Load (or reload) the spreadsheet.

        A failed load leaves no papers behind and records the error message.
        There is no automatic retry.

        Returns:
            True if the papers were loaded.
        """
        self.state = LoadState.LOADING
        self.error = None
        self.papers = ()

        try:
            self.config.validate()
            papers = await self.loader.load()
        except PaperBrowserError as e:
            logger.error(f"Failed to load papers: {e}")
            self.error = str(e)
            self.state = LoadState.ERROR
            return False

        self.papers = papers
        self.page_number = 1
        self.state = LoadState.READY
        logger.info(f"Loaded {len(papers)} papers")
        return True

    @property
    def filtered(self) -> Sequence[Paper]:
        return filter_papers(self.papers, self.query)

    @property
    def total_pages(self) -> int:
        return self.current_page().total_pages

    def current_page(self) -> Page:
        return paginate(self.filtered, self.config.page_size, self.page_number)

    def set_query(self, query: str) -> None:
        """Change the search text; a different query always goes back to page 1."""
        if query != self.query:
            self.page_number = 1
        self.query = query

    def set_page(self, page_number: int) -> int:
        """Move to a page, clamped to the pages that exist. Returns the new page."""
        last_page = max(self.total_pages, 1)
        self.page_number = min(max(page_number, 1), last_page)
        return self.page_number

    def next_page(self) -> int:
        return self.set_page(self.page_number + 1)

    def previous_page(self) -> int:
        return self.set_page(self.page_number - 1)

    def status_message(self) -> str:
        if self.state is LoadState.LOADING:
            return "Loading papers..."
        if self.state is LoadState.ERROR:
            return f"Error Loading Data: {self.error}"

        page = self.current_page()
        if page.total_items == 0:
            return "No Results Found. Try adjusting your search query."
        return f"Page {page.page_number} of {page.total_pages} ({page.total_items} papers)"
