import argparse

try:
    from config import BrowserConfig, default_source_url
except ImportError:
    from .config import BrowserConfig, default_source_url


def parse_args(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Research Paper Spreadsheet Browser")

    # Data source
    parser.add_argument(
        "--source-url",
        type=str,
        default=default_source_url(),
        help="Published spreadsheet CSV URL (defaults to $PAPER_SHEET_CSV_URL or the bundled sheet)",
    )
    parser.add_argument(
        "--request-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the spreadsheet download (default: no timeout)",
    )

    # Search and paging
    parser.add_argument(
        "--query",
        type=str,
        default="",
        help="Search by title, author, or journal",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number to show (1-indexed)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=20,
        help="Papers per page",
    )

    # Output settings
    parser.add_argument(
        "--export-csv",
        type=str,
        default=None,
        help="Write all papers matching the query to this CSV file",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Browse with an interactive prompt after loading",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args(argv)
    if args.page < 1:
        parser.error("--page must be a positive integer")
    if args.page_size < 1:
        parser.error("--page-size must be a positive integer")

    # Create configuration
    config = BrowserConfig(
        source_url=args.source_url,
        page_size=args.page_size,
        request_timeout=args.request_timeout,
    )

    return args, config
