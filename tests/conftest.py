import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """Board items covering the value shapes GitHub emits."""
    return [
        {
            "id": 101,
            "contentType": "Issue",
            "memexProjectColumnValues": [
                {"memexProjectColumnId": "Title", "value": {"number": 42, "title": {"raw": "Fix bug", "html": "Fix bug"}}},
                {"memexProjectColumnId": "Status", "value": {"id": "f75ad846"}},
                {"memexProjectColumnId": "Assignees", "value": [{"login": "alice", "id": 1}, {"login": "bob", "id": 2}]},
                {"memexProjectColumnId": "Repository", "value": {"name": "backend"}},
                {"memexProjectColumnId": "Labels", "value": [{"name": "bug"}]},
            ],
        },
        {
            "id": 102,
            "contentType": "DraftIssue",
            "memexProjectColumnValues": [
                {"memexProjectColumnId": "Title", "value": {"title": {"raw": "Write docs"}}},
                {"memexProjectColumnId": "Status", "value": {"id": "47fc9ee4"}},
                {"memexProjectColumnId": "Assignees", "value": None},
                {"memexProjectColumnId": 12345, "value": {"text": "custom"}},
            ],
        },
        {
            "id": 103,
            "contentType": "RedactedItem",
            "memexProjectColumnValues": [
                {"memexProjectColumnId": "Title", "value": "You don't have permission to access this item"},
                {"memexProjectColumnId": "Status", "value": {"id": "f75ad846"}},
            ],
        },
        {
            "id": 104,
            "contentType": "Issue",
            "memexProjectColumnValues": [
                {"memexProjectColumnId": "Title", "value": {"number": 7, "title": {"raw": "Old status"}}},
                {"memexProjectColumnId": "Status", "value": {"id": "removed-option"}},
                {"memexProjectColumnId": "Assignees", "value": [{"login": "alice"}]},
            ],
        },
    ]


@pytest.fixture
def sample_columns() -> list[dict[str, Any]]:
    return [
        {"id": "Title", "name": "Title", "dataType": "title"},
        {"id": "Assignees", "name": "Assignees", "dataType": "assignees"},
        {
            "id": "Status",
            "name": "Status",
            "dataType": "singleSelect",
            "settings": {
                "options": [
                    {"id": "f75ad846", "name": "Todo"},
                    {"id": "47fc9ee4", "name": "In Progress"},
                    {"id": 98236657, "name": "Done"},
                ]
            },
        },
        {"id": 12345, "name": "Estimate", "dataType": "number"},
    ]


@pytest.fixture
def board_html(sample_items: list[dict[str, Any]], sample_columns: list[dict[str, Any]]) -> str:
    return f"""<html><body>
<div id="memex-root"></div>
<script type="application/json" id="memex-items-data">{json.dumps(sample_items)}</script>
<script type="application/json" id="memex-columns-data">{json.dumps(sample_columns)}</script>
</body></html>"""


@pytest.fixture
def board_dir(tmp_path: Path, sample_items: list[dict[str, Any]], sample_columns: list[dict[str, Any]]) -> Path:
    (tmp_path / "memex-items-data.json").write_text(json.dumps(sample_items))
    (tmp_path / "memex-columns-data.json").write_text(json.dumps(sample_columns))
    return tmp_path


@pytest.fixture
def calendar_html() -> str:
    """
    Calendar fragment: four day cells, a legend cell, and tooltips.

    2023-06-04 deliberately has no tooltip.
    """
    return """<html><body>
<table class="ContributionCalendar-grid">
  <tbody>
    <tr>
      <td class="ContributionCalendar-day" data-date="2023-06-02" id="day-1" data-level="1"></td>
      <td class="ContributionCalendar-day" data-date="2023-06-03" id="day-2" data-level="2"></td>
      <td class="ContributionCalendar-day" data-date="2023-06-04" id="day-3" data-level="0"></td>
      <td class="ContributionCalendar-day" data-date="2023-06-05" id="day-4" data-level="0">9</td>
    </tr>
  </tbody>
</table>
<tool-tip for="day-1" class="sr-only position-absolute">1 contribution on June 2nd.</tool-tip>
<tool-tip for="day-2" class="sr-only position-absolute">5 contributions on June 3rd.</tool-tip>
<tool-tip for="day-4" class="sr-only position-absolute">No contributions on June 5th.</tool-tip>
<div class="ContributionCalendar-day" data-level="0"></div>
</body></html>"""
