"""
Contribution calendar reconciliation.

Day cells list every date in range, but the count they embed is a
placeholder. Tooltips carry the real count but are keyed by a yearless
human date and may omit days:

    <td class="ContributionCalendar-day" data-date="2023-06-03" ...></td>
    <tool-tip ...>5 contributions on June 3rd.</tool-tip>

Reconciliation is two phases:
1. Index tooltips by human date ("June 3rd" -> 5)
2. For each cell, derive its human date and look it up

A cell without a matching tooltip is reported as a gap and left out of the
series rather than guessed.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ghboard.models.contributions import (
    CalendarDayFact,
    Contributions,
    ContributionSeries,
    ReconciliationGap,
    TooltipFact,
)

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SINGULAR_PATTERN = re.compile(r"^1 contribution on (.+)$")
PLURAL_SEPARATOR = " contributions on "
ZERO_COUNT = "No"

ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def _ordinal_suffix(day: int) -> str:
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


# 1 -> "1st" ... 31 -> "31st"
ORDINAL_DAYS: dict[int, str] = {day: f"{day}{_ordinal_suffix(day)}" for day in range(1, 32)}


def ordinal_day(day: int) -> str:
    """
    Ordinal form of a day of month.

    Raises:
        ValueError: If day is outside 1-31
    """
    try:
        return ORDINAL_DAYS[day]
    except KeyError:
        raise ValueError(f"No ordinal for day {day}") from None


def month_name(month: int) -> str:
    """
    Full English month name for 1-12.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"No month name for month {month}")
    return MONTH_NAMES[month - 1]


def human_date(iso_date: str) -> str:
    """
    Convert "2023-06-03" to the tooltip form "June 3rd".

    Only the month and day ranges are checked; the year is ignored, as it
    is in the tooltips.

    Raises:
        ValueError: If the date is malformed or month/day are out of range
    """
    match = ISO_DATE_PATTERN.match(iso_date)
    if not match:
        raise ValueError(f"Malformed ISO date: {iso_date!r}")
    _, month, day = (int(part) for part in match.groups())
    return f"{month_name(month)} {ordinal_day(day)}"


def parse_tooltip(text: str) -> TooltipFact | None:
    """
    Parse a tooltip sentence.

    Handles:
        - "No contributions on June 3rd." -> 0
        - "1 contribution on May 1st." -> 1
        - "5 contributions on July 4th." -> 5
        - "1,024 contributions on July 4th." -> 1024

    Returns:
        TooltipFact, or None if the text is not a contribution sentence
    """
    normalized = " ".join(text.split()).rstrip(".")
    if not normalized:
        return None

    match = SINGULAR_PATTERN.match(normalized)
    if match:
        return TooltipFact(human_date=match.group(1), count=1)

    if PLURAL_SEPARATOR not in normalized:
        logger.debug("Ignoring tooltip text: %r", text)
        return None

    left, right = normalized.split(PLURAL_SEPARATOR, 1)
    if left == ZERO_COUNT:
        return TooltipFact(human_date=right, count=0)

    digits = left.replace(",", "")
    if not digits.isdigit():
        logger.debug("Ignoring tooltip with unparseable count: %r", text)
        return None

    return TooltipFact(human_date=right, count=int(digits))


def build_tooltip_index(texts: Iterable[str]) -> Mapping[str, int]:
    """
    Parse tooltips into a read-only human date -> count mapping.

    If the same human date appears twice (the calendar can span a little
    more than a year), the later tooltip wins.
    """
    index: dict[str, int] = {}
    for text in texts:
        fact = parse_tooltip(text)
        if fact is not None:
            index[fact.human_date] = fact.count
    return MappingProxyType(index)


def reconcile(
    cells: Iterable[CalendarDayFact],
    tooltip_index: Mapping[str, int],
) -> Contributions:
    """
    Combine calendar cells with tooltip counts.

    The tooltip count always wins over the count embedded in the cell.
    Cells that cannot be matched are recorded as gaps and omitted from the
    series; one bad day never aborts the rest.

    Args:
        cells: Day cells, any order
        tooltip_index: Output of build_tooltip_index()

    Returns:
        Contributions with a key-ordered series and the gaps found
    """
    counts: dict[str, int] = {}
    gaps: list[ReconciliationGap] = []

    for cell in cells:
        try:
            key = human_date(cell.iso_date)
        except ValueError as e:
            gaps.append(ReconciliationGap(cell.iso_date, cell.weekday, str(e)))
            continue

        # In range but not a real date, e.g. 2023-02-30
        if cell.weekday is None:
            gaps.append(ReconciliationGap(cell.iso_date, None, f"invalid date {cell.iso_date}"))
            continue

        count = tooltip_index.get(key)
        if count is None:
            gaps.append(ReconciliationGap(cell.iso_date, cell.weekday, f"no tooltip for {key}"))
            continue

        counts[cell.key] = count

    for gap in gaps:
        logger.debug("Contribution count unavailable for %s: %s", gap.iso_date, gap.reason)

    return Contributions(
        series=ContributionSeries.from_mapping(counts),
        gaps=tuple(gaps),
    )
