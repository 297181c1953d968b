"""
Terminal rendering for board items and contribution days.

Renderers return rich Text so callers (and tests) can inspect plain text
and styles separately from printing.
"""

from rich.text import Text

from ghboard.config import BUSY_DAY_THRESHOLD
from ghboard.models.board import BoardItem
from ghboard.models.contributions import ReconciliationGap

WEEKEND_SUFFIXES = (", Sat", ", Sun")


def render_status_heading(name: str) -> Text:
    return Text(name, style="yellow")


def render_item(item: BoardItem) -> Text:
    """Render "#<number>\\t<title> <assignees>"."""
    text = Text()
    text.append(f"#{item.issue_number()}", style="green")
    text.append("\t")
    text.append(item.title(), style="white")
    text.append(" ")
    text.append(item.assignees_joined(), style="magenta")
    return text


def count_style(count: int) -> str:
    if count > BUSY_DAY_THRESHOLD:
        return "yellow"
    if count > 0:
        return "green"
    return "red"


def render_day(key: str, count: int) -> Text:
    """
    Render one "<date>, <Weekday>: <count>" line.

    Weekends are struck through; weekdays are colored by activity.
    """
    text = Text()
    if key.endswith(WEEKEND_SUFFIXES):
        text.append(key, style="magenta strike")
        text.append(": ")
        text.append(str(count), style="magenta")
    else:
        text.append(key)
        text.append(": ")
        text.append(str(count), style=count_style(count))
    return text


def render_contributions_header(user: str, days: int) -> Text:
    text = Text()
    text.append(user, style="yellow")
    text.append(", last ")
    text.append(str(days), style="green")
    text.append(" days:")
    return text


def render_gap(gap: ReconciliationGap) -> Text:
    day = f"{gap.iso_date}, {gap.weekday.value}" if gap.weekday else gap.iso_date
    return Text(f"warning: {day} skipped ({gap.reason})", style="yellow")
