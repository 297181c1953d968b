"""
Contribution calendar models.

The calendar page describes each day twice: a machine-readable cell (ISO
date, placeholder count) and a human-readable tooltip (authoritative count,
yearless "Month Day" key). These models hold both inputs and the reconciled
result.

INVARIANTS:
- ContributionSeries keys are "<isoDate>, <Weekday>" and are always sorted
  ascending; ISO dates sort chronologically, so key order is date order
- All models are frozen (immutable after construction)
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Weekday(str, Enum):
    """Day of week, rendered as its three-letter abbreviation."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        return list(cls)[day.weekday()]

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SAT, Weekday.SUN)


@dataclass(frozen=True, slots=True)
class CalendarDayFact:
    """
    One day cell from the calendar grid.

    Attributes:
        iso_date: Date as found in the data-date attribute (YYYY-MM-DD)
        weekday: Day of week for iso_date, None when iso_date is not a real date
        count: Count embedded in the cell; a placeholder, not trusted
    """

    iso_date: str
    weekday: Weekday | None
    count: int = 0

    @property
    def key(self) -> str:
        """Display key used in ContributionSeries."""
        return f"{self.iso_date}, {self.weekday.value}"


@dataclass(frozen=True, slots=True)
class TooltipFact:
    """A parsed tooltip: "<N> contributions on <human_date>."."""

    human_date: str  # e.g. "June 3rd"
    count: int


@dataclass(frozen=True, slots=True)
class ReconciliationGap:
    """A calendar day that could not be given an authoritative count."""

    iso_date: str
    weekday: Weekday | None
    reason: str


@dataclass(frozen=True)
class ContributionSeries:
    """
    Immutable, key-ordered mapping of "<isoDate>, <Weekday>" -> count.

    Build with from_mapping(); ordering comes from sorting the keys, never
    from the order entries were produced in.
    """

    entries: tuple[tuple[str, int], ...] = ()

    @classmethod
    def from_mapping(cls, counts: Mapping[str, int]) -> "ContributionSeries":
        return cls(entries=tuple(sorted(counts.items())))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def __getitem__(self, key: str) -> int:
        for entry_key, count in self.entries:
            if entry_key == key:
                return count
        raise KeyError(key)

    def items(self) -> list[tuple[str, int]]:
        return list(self.entries)

    def as_dict(self) -> dict[str, int]:
        return dict(self.entries)

    def tail(self, n: int) -> "ContributionSeries":
        """Last n entries; the whole series when n exceeds its length."""
        if n <= 0:
            return ContributionSeries()
        return ContributionSeries(entries=self.entries[-n:])


@dataclass(frozen=True)
class Contributions:
    """
    Reconciled contribution calendar.

    Attributes:
        series: Authoritative daily counts, chronological
        gaps: Days omitted from the series, with the reason
    """

    series: ContributionSeries = field(default_factory=ContributionSeries)
    gaps: tuple[ReconciliationGap, ...] = ()

    def latest(self, days: int) -> ContributionSeries:
        """Pick the latest days from the series."""
        return self.series.tail(days)

    def latest_gaps(self, days: int) -> tuple[ReconciliationGap, ...]:
        """
        Gaps that fall inside the window shown by latest(days).

        The window starts at the first date of latest(days); with an empty
        series every gap is in the window (for days > 0).
        """
        if days <= 0:
            return ()
        window = self.latest(days)
        if not window:
            return self.gaps
        start = next(iter(window)).split(", ", 1)[0]
        return tuple(gap for gap in self.gaps if gap.iso_date >= start)
