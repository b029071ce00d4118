"""
Command-line front end for browsing the published paper spreadsheet.

The spreadsheet is loaded once, then:
1. Filtered by the search query
2. Sliced to the requested page
3. Printed as a table (and optionally exported to CSV)

With --interactive the query and page can be changed from a prompt.
"""

import asyncio
import logging

try:
    from argument_parser import parse_args
    from browser import LoadState, PaperBrowser
    from utils import export_papers_csv, render_page
except ImportError:
    from .argument_parser import parse_args
    from .browser import LoadState, PaperBrowser
    from .utils import export_papers_csv, render_page

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: / <text> (search), n (next), p (previous), g <page> (go to page), "
    "r (reload), q (quit)"
)


def show(browser: PaperBrowser) -> None:
    """Print the current page and the status line."""
    if browser.state is LoadState.READY:
        table = render_page(browser.current_page())
        if table:
            print(table)
    print(browser.status_message())


async def handle_command(browser: PaperBrowser, line: str) -> bool:
    """
    Apply one interactive command to the browser.

    Returns:
        False when the user asked to quit.
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()

    if command in ("q", "quit", "exit"):
        return False
    if command in ("/", "search"):
        browser.set_query(argument)
    elif command.startswith("/"):
        browser.set_query(line.strip()[1:])
    elif command in ("n", "next"):
        browser.next_page()
    elif command in ("p", "prev", "previous"):
        browser.previous_page()
    elif command in ("g", "page", "goto"):
        try:
            browser.set_page(int(argument))
        except ValueError:
            print(f"Not a page number: {argument!r}")
            return True
    elif command in ("r", "reload"):
        print(browser.status_message())
        await browser.load()
    else:
        print(HELP_TEXT)
        return True

    show(browser)
    return True


async def run_interactive(browser: PaperBrowser) -> None:
    print(HELP_TEXT)
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            break
        if not await handle_command(browser, line):
            break


async def main(argv: list[str] | None = None) -> int:
    """Main entry point for the browser."""
    args, config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"🔍 Arguments: {args}")

    browser = PaperBrowser(config)
    print(browser.status_message())
    if not await browser.load():
        print(f"❌ {browser.status_message()}")
        return 1

    browser.set_query(args.query)
    browser.set_page(args.page)
    if browser.page_number != args.page:
        logger.warning(
            f"Page {args.page} does not exist, showing page {browser.page_number}"
        )
    show(browser)

    if args.export_csv:
        path = export_papers_csv(list(browser.filtered), args.export_csv)
        logger.info(f"💾 Saved {len(browser.filtered)} papers to {path}")

    if args.interactive:
        await run_interactive(browser)

    return 0


def cli() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
