"""
Command line interface for ghboard.

Usage:
    ghboard list --status STATUS_ID[,STATUS_ID...] [--user LOGIN]
    ghboard contributions [--user LOGIN] [--days N]

Board access needs the board URL and two session cookies from a logged-in
browser; all of them can come from GH_BOARD_* environment variables.
"""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError
from rich.console import Console

from ghboard.config import Settings, get_settings, split_statuses
from ghboard.display import (
    render_contributions_header,
    render_day,
    render_gap,
    render_item,
    render_status_heading,
)
from ghboard.errors import GhBoardError
from ghboard.models.board import BoardModel
from ghboard.models.contributions import Contributions
from ghboard.scrapers.github import (
    fetch_board,
    fetch_contributions,
    load_board_from_directory,
    load_contributions_from_file,
)

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the CLI parser; defaults come from settings."""
    parser = argparse.ArgumentParser(
        prog="ghboard",
        description="Show GitHub project board items and contribution activity",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    list_p = commands.add_parser("list", help="Display board items by status")
    list_p.add_argument(
        "--url",
        default=settings.url,
        help="Project board URL, e.g. https://github.com/orgs/COMPANY/projects/PROJECT",
    )
    list_p.add_argument(
        "--user-session",
        default=settings.user_session,
        help="user_session cookie value",
    )
    list_p.add_argument(
        "--github-session",
        default=settings.github_session,
        help="_gh_sess cookie value",
    )
    list_p.add_argument(
        "-s",
        "--status",
        default=settings.statuses,
        help="Comma-separated status ids to display",
    )
    list_p.add_argument("-u", "--user", default=settings.user, help="Filter by assignee login")
    list_p.add_argument(
        "--local-path",
        type=Path,
        help="Read memex-*-data.json from this directory instead of fetching",
    )

    contrib_p = commands.add_parser("contributions", help="Display daily contribution counts")
    contrib_p.add_argument(
        "-u",
        "--user",
        default=settings.contributions_user,
        help="GitHub user (default: git config --global user.name)",
    )
    contrib_p.add_argument("-d", "--days", type=int, default=settings.days, help="Days to show")
    contrib_p.add_argument(
        "--local-file",
        type=Path,
        help="Parse a saved contributions HTML page instead of fetching",
    )

    return parser


def git_user_name() -> str:
    """Return user.name from the global git config, or "" if unavailable."""
    try:
        result = subprocess.run(
            ["git", "config", "--global", "user.name"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.debug("git not available: %s", e)
        return ""
    return result.stdout.strip()


def print_board(console: Console, board: BoardModel, statuses: list[str], user: str | None) -> None:
    for status_id in statuses:
        console.print(render_status_heading(board.display_status(status_id)))
        for item in board.filter_by_status(status_id):
            if user and not item.contains_assignee(user):
                continue
            console.print(render_item(item))


def print_contributions(console: Console, user: str, days: int, contributions: Contributions) -> None:
    console.print(render_contributions_header(user, days))
    for key, count in contributions.latest(days).items():
        console.print(render_day(key, count))
    for gap in contributions.latest_gaps(days):
        console.print(render_gap(gap))


def run_list(args: argparse.Namespace, parser: argparse.ArgumentParser, console: Console) -> None:
    statuses = split_statuses(args.status)
    if not statuses:
        parser.error("list: no statuses given (use --status or GH_BOARD_STATUSES)")

    if args.local_path:
        board = load_board_from_directory(args.local_path)
    else:
        if not (args.url and args.user_session and args.github_session):
            parser.error("list: --url, --user-session and --github-session are required")
        board = fetch_board(args.url, args.user_session, args.github_session)

    print_board(console, board, statuses, args.user)


def run_contributions(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    console: Console,
) -> None:
    if args.local_file:
        user = args.user or args.local_file.stem
        contributions = load_contributions_from_file(args.local_file)
    else:
        user = args.user or git_user_name()
        if not user:
            parser.error("contributions: no user provided and no git user found")
        contributions = fetch_contributions(user)

    print_contributions(console, user, args.days, contributions)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"ghboard: invalid GH_BOARD_* configuration:\n{e}", file=sys.stderr)
        return 1

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console(soft_wrap=True)
    try:
        if args.command == "list":
            run_list(args, parser, console)
        else:
            run_contributions(args, parser, console)
    except httpx.HTTPError as e:
        logger.error("Failed to fetch page: %s", e)
        return 1
    except GhBoardError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Failed to read local data: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
