from ghboard.display import (
    count_style,
    render_contributions_header,
    render_day,
    render_gap,
    render_item,
)
from ghboard.models.board import AssigneesColumn, BoardItem, TitleColumn
from ghboard.models.contributions import ReconciliationGap, Weekday


class TestRenderItem:
    def test_plain_text(self) -> None:
        item = BoardItem(1, (TitleColumn("Fix bug", 42), AssigneesColumn(("alice", "bob"))))

        assert render_item(item).plain == "#42\tFix bug alice,bob"

    def test_number_is_green(self) -> None:
        text = render_item(BoardItem(1, (TitleColumn("Fix bug", 42),)))

        assert text.spans[0].style == "green"


class TestRenderDay:
    def test_weekday_plain_text(self) -> None:
        assert render_day("2023-06-05, Mon", 2).plain == "2023-06-05, Mon: 2"

    def test_weekend_struck_through(self) -> None:
        text = render_day("2023-06-03, Sat", 5)

        assert text.spans[0].style == "magenta strike"
        assert text.spans[-1].style == "magenta"

    def test_count_styles(self) -> None:
        assert count_style(0) == "red"
        assert count_style(1) == "green"
        assert count_style(3) == "green"
        assert count_style(4) == "yellow"

    def test_weekday_uses_count_style(self) -> None:
        assert render_day("2023-06-05, Mon", 0).spans[-1].style == "red"


class TestRenderHeaders:
    def test_contributions_header(self) -> None:
        assert render_contributions_header("octocat", 14).plain == "octocat, last 14 days:"

    def test_gap(self) -> None:
        gap = ReconciliationGap("2023-06-04", Weekday.SUN, "no tooltip for June 4th")

        assert render_gap(gap).plain == "warning: 2023-06-04, Sun skipped (no tooltip for June 4th)"

    def test_gap_without_weekday(self) -> None:
        gap = ReconciliationGap("2023-02-30", None, "invalid date 2023-02-30")

        assert render_gap(gap).plain == "warning: 2023-02-30 skipped (invalid date 2023-02-30)"
