"""
GitHub page scraper.

Fetches project board and contribution calendar pages and pulls out the
raw data anchors the decoders work from:

- Project board: JSON blobs in #memex-items-data and #memex-columns-data.
  Private boards need the browser session cookies (user_session, _gh_sess).
- Contribution calendar: .ContributionCalendar-day cells and their
  <tool-tip> descriptions.

Note: Web scraping is inherently fragile. Page structure may change.
"""

import logging
import re
from datetime import date
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from ghboard.errors import PageStructureError
from ghboard.models.board import BoardModel
from ghboard.models.contributions import CalendarDayFact, Contributions, Weekday
from ghboard.parsers.board_columns import build_board
from ghboard.parsers.contributions import build_tooltip_index, reconcile

logger = logging.getLogger(__name__)

GITHUB_BASE = "https://github.com"
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36"
)

ITEMS_ANCHOR = "memex-items-data"
COLUMNS_ANCHOR = "memex-columns-data"
ITEMS_FILE = f"{ITEMS_ANCHOR}.json"
COLUMNS_FILE = f"{COLUMNS_ANCHOR}.json"

DAY_CELL_CLASS = "ContributionCalendar-day"
TOOLTIP_TAG = "tool-tip"

LEADING_DIGITS = re.compile(r"^\d+")


def session_cookie(user_session: str, github_session: str) -> str:
    """Cookie header value carrying a logged-in browser session."""
    return f"user_session={user_session}; _gh_sess={github_session}"


def fetch_page(
    url: str,
    cookie: str | None = None,
    client: httpx.Client | None = None,
) -> str:
    """
    Fetch a page as text.

    A single attempt, no timeout and no retry.

    Args:
        url: Page URL
        cookie: Optional Cookie header value
        client: Optional httpx client for connection reuse

    Returns:
        Raw HTML content

    Raises:
        httpx.HTTPError: If request fails
    """
    headers = {"User-Agent": USER_AGENT}
    if cookie:
        headers["Cookie"] = cookie

    if client:
        response = client.get(url, headers=headers, follow_redirects=True, timeout=None)
    else:
        response = httpx.get(url, headers=headers, follow_redirects=True, timeout=None)

    response.raise_for_status()
    logger.info("Downloaded %s: %d bytes", url, len(response.content))
    return response.text


# =============================================================================
# PROJECT BOARD
# =============================================================================


def extract_board_data(html: str) -> tuple[str, str]:
    """
    Extract the raw items and columns JSON from a board page.

    Returns:
        (items JSON text, columns JSON text)

    Raises:
        PageStructureError: If either anchor element is missing
    """
    soup = BeautifulSoup(html, "html.parser")

    blobs: list[str] = []
    for anchor in (ITEMS_ANCHOR, COLUMNS_ANCHOR):
        element = soup.find(id=anchor)
        if element is None:
            raise PageStructureError(
                f"#{anchor}",
                "page is not a project board or the session cookies are not valid",
            )
        # Anchors are <script type="application/json"> elements holding one string
        blobs.append(element.string if element.string is not None else element.get_text())

    return blobs[0], blobs[1]


def parse_board_page(html: str) -> BoardModel:
    """Parse a board page into a BoardModel."""
    items_json, columns_json = extract_board_data(html)
    board = build_board(items_json, columns_json)
    logger.info(
        "Decoded %d board items (%d skipped), %d status options",
        len(board.items),
        len(board.decode_failures),
        len(board.status_options),
    )
    return board


def fetch_board(
    url: str,
    user_session: str,
    github_session: str,
    client: httpx.Client | None = None,
) -> BoardModel:
    """
    Fetch and decode a project board.

    Args:
        url: Board URL, e.g. https://github.com/orgs/COMPANY/projects/1
        user_session: Value of the user_session cookie
        github_session: Value of the _gh_sess cookie
        client: Optional httpx client for connection reuse

    Raises:
        httpx.HTTPError: If the request fails
        PageStructureError: If the page carries no board data
        BoardDataError: If the board data is not a JSON array
    """
    html = fetch_page(url, cookie=session_cookie(user_session, github_session), client=client)
    return parse_board_page(html)


def load_board_from_directory(path: Path) -> BoardModel:
    """
    Load a board from saved JSON files, for offline use and testing.

    Expects memex-items-data.json and memex-columns-data.json in path.
    """
    items_json = (path / ITEMS_FILE).read_text(encoding="utf-8")
    columns_json = (path / COLUMNS_FILE).read_text(encoding="utf-8")
    return build_board(items_json, columns_json)


# =============================================================================
# CONTRIBUTION CALENDAR
# =============================================================================


def contributions_url(user: str) -> str:
    return f"{GITHUB_BASE}/users/{user}/contributions"


def _leading_count(text: str) -> int:
    """Collect digits from the beginning of the cell text."""
    match = LEADING_DIGITS.match(text.strip())
    return int(match.group(0)) if match else 0


def extract_calendar(html: str) -> tuple[list[CalendarDayFact], list[str]]:
    """
    Extract day cells and tooltip texts from a calendar page.

    Cells without a data-date (legend squares) are ignored; cells with an
    invalid date are kept with no weekday so reconcile() can report them.

    Returns:
        (day cells in document order, tooltip texts in document order)

    Raises:
        PageStructureError: If the page has no day cells at all
    """
    soup = BeautifulSoup(html, "html.parser")

    cells = soup.find_all(class_=DAY_CELL_CLASS)
    if not cells:
        raise PageStructureError(f".{DAY_CELL_CLASS}", "no contribution calendar on page")

    days: list[CalendarDayFact] = []
    for cell in cells:
        iso_date = cell.get("data-date")
        if not iso_date:
            continue
        try:
            weekday = Weekday.from_date(date.fromisoformat(iso_date))
        except ValueError:
            weekday = None
        days.append(
            CalendarDayFact(
                iso_date=iso_date,
                weekday=weekday,
                count=_leading_count(cell.get_text()),
            )
        )

    tooltips = [tip.get_text() for tip in soup.find_all(TOOLTIP_TAG)]
    return days, tooltips


def parse_contributions_page(html: str) -> Contributions:
    """Parse a calendar page into reconciled Contributions."""
    days, tooltips = extract_calendar(html)
    contributions = reconcile(days, build_tooltip_index(tooltips))
    logger.info(
        "Reconciled %d calendar days (%d gaps)",
        len(contributions.series),
        len(contributions.gaps),
    )
    return contributions


def fetch_contributions(user: str, client: httpx.Client | None = None) -> Contributions:
    """
    Fetch and reconcile a user's public contribution calendar.

    Raises:
        httpx.HTTPError: If the request fails
        PageStructureError: If the page has no calendar
    """
    return parse_contributions_page(fetch_page(contributions_url(user), client=client))


def load_contributions_from_file(path: Path) -> Contributions:
    """Parse contributions from a saved HTML page."""
    return parse_contributions_page(path.read_text(encoding="utf-8"))
