from ghboard.models.board import (
    AssigneesColumn,
    BoardColumn,
    BoardItem,
    BoardModel,
    ItemDecodeFailure,
    RepositoryColumn,
    StatusColumn,
    StatusOption,
    TitleColumn,
)
from ghboard.models.contributions import (
    CalendarDayFact,
    Contributions,
    ContributionSeries,
    ReconciliationGap,
    TooltipFact,
    Weekday,
)

__all__ = [
    "AssigneesColumn",
    "BoardColumn",
    "BoardItem",
    "BoardModel",
    "CalendarDayFact",
    "ContributionSeries",
    "Contributions",
    "ItemDecodeFailure",
    "ReconciliationGap",
    "RepositoryColumn",
    "StatusColumn",
    "StatusOption",
    "TitleColumn",
    "TooltipFact",
    "Weekday",
]
