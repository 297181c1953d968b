"""
Project board models.

A GitHub project ("memex") board item is a bag of column values, one per
column type shown on the board. Only four column types carry meaning here;
each is decoded into its own frozen variant and the item exposes derived
accessors over the variant list.

INVARIANTS:
- All models are frozen (immutable after construction)
- Accessors never fail: an absent variant yields its empty default
- When a variant appears more than once, the last occurrence wins
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class TitleColumn:
    """
    Title column value.

    Attributes:
        title: Raw issue/PR/draft title (or the placeholder text GitHub
            renders when the viewer cannot see the underlying item)
        issue_number: Issue or PR number, 0 for drafts and redacted items
    """

    title: str = ""
    issue_number: int = 0


@dataclass(frozen=True, slots=True)
class StatusColumn:
    """Status column value: the id of a single-select status option."""

    status_id: str = ""


@dataclass(frozen=True, slots=True)
class AssigneesColumn:
    """Assignees column value, in board order."""

    logins: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RepositoryColumn:
    """Repository column value."""

    name: str = ""


BoardColumn = TitleColumn | StatusColumn | AssigneesColumn | RepositoryColumn


@dataclass(frozen=True, slots=True)
class BoardItem:
    """
    One card on the project board.

    Attributes:
        item_id: Opaque identifier from the page data (not interpreted)
        columns: Decoded column values in document order
    """

    item_id: str | int | None
    columns: tuple[BoardColumn, ...] = ()

    def _last(self, kind: type) -> BoardColumn | None:
        found = None
        for column in self.columns:
            if isinstance(column, kind):
                found = column
        return found

    def title(self) -> str:
        """Title of the item."""
        column = self._last(TitleColumn)
        return column.title if column else ""

    def issue_number(self) -> int:
        """Number of the issue, 0 when there is none."""
        column = self._last(TitleColumn)
        return column.issue_number if column else 0

    def status_id(self) -> str:
        """Status option id of the item."""
        column = self._last(StatusColumn)
        return column.status_id if column else ""

    def assignee_logins(self) -> list[str]:
        column = self._last(AssigneesColumn)
        return list(column.logins) if column else []

    def assignees_joined(self) -> str:
        """Assignees as a comma-separated string."""
        return ",".join(self.assignee_logins())

    def repository_name(self) -> str:
        column = self._last(RepositoryColumn)
        return column.name if column else ""

    def contains_assignee(self, login: str) -> bool:
        """Whether one of the assignees matches (exact, case-sensitive)."""
        return login in self.assignee_logins()


@dataclass(frozen=True, slots=True)
class StatusOption:
    """One allowed value of the board's Status column type."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class ItemDecodeFailure:
    """An item that was skipped because its payload could not be classified."""

    index: int
    item_id: str | int | None
    reason: str


@dataclass(frozen=True)
class BoardModel:
    """
    Decoded board snapshot.

    Attributes:
        items: Items in page order
        status_options: Status id -> human readable name (read-only)
        decode_failures: Items that were dropped during decoding
    """

    items: tuple[BoardItem, ...] = ()
    status_options: Mapping[str, str] = field(default_factory=dict)
    decode_failures: tuple[ItemDecodeFailure, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "status_options", MappingProxyType(dict(self.status_options)))

    def status_name(self, status_id: str) -> str | None:
        """
        Human readable name of a status, or None when it is unknown.

        Unknown ids are legitimate: an option may have been removed from
        the board configuration after items were tagged with it.
        """
        return self.status_options.get(status_id)

    def display_status(self, status_id: str) -> str:
        """Status name for display, falling back to the raw id."""
        name = self.status_name(status_id)
        return name if name is not None else status_id

    def filter_by_status(self, status_id: str) -> list[BoardItem]:
        return [item for item in self.items if item.status_id() == status_id]

    def filter_by_assignee(self, login: str) -> list[BoardItem]:
        return [item for item in self.items if item.contains_assignee(login)]
