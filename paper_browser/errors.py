"""
Exceptions raised while loading the paper spreadsheet.
"""


class PaperBrowserError(Exception):
    """Base class for errors that abort a load."""


class ConfigurationError(PaperBrowserError):
    """The source URL is missing, a placeholder, or malformed."""


class FetchError(PaperBrowserError):
    """The spreadsheet could not be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(PaperBrowserError):
    """The response body could not be split into rows and fields."""
