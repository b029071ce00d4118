"""
Configuration module for the paper browser.
"""

from dataclasses import dataclass
from urllib.parse import urlparse
import os

try:
    from errors import ConfigurationError
except ImportError:
    from .errors import ConfigurationError

# Google Sheets: File > Share > Publish to web > Entire Document > CSV
DEFAULT_SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vSHAAiPFIlWiXooENqd4nDAqOzUfUNUlQoH-qQlCdnFTVmtnyeh1fbS-HNvnCtWb2Xp4YP0Ws8Xm_xS"
    "/pub?output=csv"
)
PLACEHOLDER_MARKER = "YOUR_URL_HERE"
SOURCE_URL_ENV_VAR = "PAPER_SHEET_CSV_URL"


def default_source_url() -> str:
    return os.environ.get(SOURCE_URL_ENV_VAR, DEFAULT_SHEET_CSV_URL)


def validate_source_url(url: str | None) -> str:
    """
    Check that a source URL is usable before any network access.

    Args:
        url: the configured spreadsheet CSV URL

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        ConfigurationError: if the URL is empty, still the placeholder, or not
            an absolute http(s) URL.
    """
    if not url or not url.strip():
        raise ConfigurationError("No spreadsheet CSV URL is configured.")
    url = url.strip()
    if PLACEHOLDER_MARKER in url:
        raise ConfigurationError(
            "Please replace the placeholder spreadsheet URL with the published CSV link "
            f"(--source-url or ${SOURCE_URL_ENV_VAR})."
        )
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Not a valid http(s) URL: {url!r}")
    return url


@dataclass
class BrowserConfig:
    """Configuration for loading and paging the paper spreadsheet."""

    source_url: str = DEFAULT_SHEET_CSV_URL

    # Display
    page_size: int = 20  # Papers per page

    # Transport
    request_timeout: float | None = None  # Seconds; None waits on the transport

    def validate(self) -> "BrowserConfig":
        self.source_url = validate_source_url(self.source_url)
        if self.page_size < 1:
            raise ConfigurationError(
                f"page_size must be a positive integer, got {self.page_size}"
            )
        return self
