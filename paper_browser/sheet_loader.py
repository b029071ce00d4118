"""
Loader for a spreadsheet published as comma-separated values.
"""

import asyncio
import csv
import io
import logging
import requests  # type: ignore

try:
    from config import BrowserConfig, validate_source_url
    from errors import FetchError, ParseError
    from models import PAPER_COLUMNS, Paper
except ImportError:
    from .config import BrowserConfig, validate_source_url
    from .errors import FetchError, ParseError
    from .models import PAPER_COLUMNS, Paper

logger = logging.getLogger(__name__)


def decode_body(raw: bytes) -> str:
    """Decode a response body as UTF-8, dropping a leading byte order mark."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Response body is not valid UTF-8: {e}") from e


def parse_papers(text: str) -> tuple[Paper, ...]:
    """
    Parse CSV text into papers, mapping columns by header name.

    The first row is the header. Quoted fields may contain commas, doubled
    quotes and newlines. Rows whose field count differs from the header are
    skipped.

    Args:
        text: the full CSV document

    Returns:
        Papers in source row order. An empty document or a header-only
        document gives an empty tuple.

    Raises:
        ParseError: if the text cannot be split into rows and fields, or the
            header is missing or repeats one of the paper columns.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        # Leading blank lines come before the header
        for header in reader:
            if header:
                break
        else:
            logger.info("Spreadsheet is empty")
            return ()

        header = [name.strip() for name in header]
        missing = [column for column in PAPER_COLUMNS if column not in header]
        if missing:
            raise ParseError(
                f"Header is missing required columns: {', '.join(missing)}"
            )
        duplicated = [column for column in PAPER_COLUMNS if header.count(column) > 1]
        if duplicated:
            raise ParseError(
                f"Header repeats required columns: {', '.join(duplicated)}"
            )

        papers: list[Paper] = []
        skipped = 0
        for row in reader:
            if len(row) != len(header):
                skipped += 1
                logger.debug(
                    f"Skipping row {reader.line_num}: expected {len(header)} fields, got {len(row)}"
                )
                continue
            papers.append(Paper.from_row(dict(zip(header, row))))
    except csv.Error as e:
        raise ParseError(f"Malformed CSV near line {reader.line_num}: {e}") from e

    if skipped:
        logger.info(f"Skipped {skipped} rows with a field count mismatch")
    logger.info(f"Parsed {len(papers)} papers")
    return tuple(papers)


class SheetLoader:
    """Fetches the published spreadsheet and turns it into papers."""

    def __init__(self, config: BrowserConfig):
        self.config = config

    def fetch_text(self) -> str:
        """
        Read the whole spreadsheet export with a single GET request.

        Returns:
            The decoded response body.

        Raises:
            ConfigurationError: if the source URL is unusable (checked first).
            FetchError: on a network failure or a non-2xx response.
            ParseError: if the body is not valid UTF-8.
        """
        url = validate_source_url(self.config.source_url)
        logger.info(f"Fetching spreadsheet from {url}")

        try:
            response = requests.get(url, timeout=self.config.request_timeout)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch spreadsheet: {e}") from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Failed to fetch spreadsheet: HTTP {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        return decode_body(response.content)

    async def load(self) -> tuple[Paper, ...]:
        """
        Fetch and parse the spreadsheet.

        The blocking read runs in a worker thread, so this is the only point
        where the caller is suspended.

        Returns:
            Papers in source row order.
        """
        text = await asyncio.to_thread(self.fetch_text)
        return parse_papers(text)


async def load_papers(
    source_url: str, request_timeout: float | None = None
) -> tuple[Paper, ...]:
    """Load papers from a published spreadsheet URL."""
    config = BrowserConfig(source_url=source_url, request_timeout=request_timeout)
    return await SheetLoader(config).load()
