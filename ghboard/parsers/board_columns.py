"""
Decoder for GitHub project board ("memex") JSON.

The board page embeds two JSON arrays:

    #memex-items-data    [{"id": 1, "memexProjectColumnValues": [...]}, ...]
    #memex-columns-data  [{"id": "Status", "settings": {"options": [...]}}, ...]

Each column value is a tagged pair:

    {"memexProjectColumnId": "Title", "value": {"number": 42, "title": {"raw": "Fix bug"}}}

The value shape depends on the tag and is weakly typed: null for empty
cells, a bare string for items hidden from the viewer, or a nested object.
Malformed values degrade to the column's empty default; only an entry that
cannot be classified at all fails its item, and a failed item never stops
its siblings from decoding.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from ghboard.errors import BoardDataError, DecodeError
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

logger = logging.getLogger(__name__)

TAG_FIELD = "memexProjectColumnId"
VALUE_FIELD = "value"
COLUMN_VALUES_FIELD = "memexProjectColumnValues"
STATUS_COLUMN_ID = "Status"


def _as_id(value: Any) -> str | None:
    """Ids arrive as strings or numbers; normalize to string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None


def decode_title(value: Any) -> TitleColumn:
    """
    Decode a Title value.

    Handles:
        - null -> empty title, number 0
        - "some text" -> redacted item, text as title, number 0
        - {"number": 42, "title": {"raw": "Fix bug"}} -> full decode
    """
    if value is None:
        return TitleColumn()
    if isinstance(value, str):
        # i.e. "You don't have permission to access this item"
        return TitleColumn(title=value)
    if not isinstance(value, dict):
        logger.debug("Unexpected Title value type: %s", type(value).__name__)
        return TitleColumn()

    number = value.get("number")
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        number = 0

    title_obj = value.get("title")
    raw = title_obj.get("raw") if isinstance(title_obj, dict) else None

    return TitleColumn(title=raw if isinstance(raw, str) else "", issue_number=number)


def decode_status(value: Any) -> StatusColumn:
    if not isinstance(value, dict):
        if value is not None:
            logger.debug("Unexpected Status value type: %s", type(value).__name__)
        return StatusColumn()
    return StatusColumn(status_id=_as_id(value.get("id")) or "")


def decode_assignees(value: Any) -> AssigneesColumn:
    if not isinstance(value, list):
        if value is not None:
            logger.debug("Unexpected Assignees value type: %s", type(value).__name__)
        return AssigneesColumn()

    logins: list[str] = []
    for assignee in value:
        login = assignee.get("login") if isinstance(assignee, dict) else None
        if isinstance(login, str):
            logins.append(login)
        else:
            logger.debug("Skipping assignee without login: %r", assignee)
    return AssigneesColumn(logins=tuple(logins))


def decode_repository(value: Any) -> RepositoryColumn:
    name = value.get("name") if isinstance(value, dict) else None
    return RepositoryColumn(name=name if isinstance(name, str) else "")


# Tag -> decoder. Tags not listed here are ignored.
COLUMN_DECODERS: dict[str, Callable[[Any], BoardColumn]] = {
    "Title": decode_title,
    "Status": decode_status,
    "Assignees": decode_assignees,
    "Repository": decode_repository,
}


def decode_column(entry: Any) -> BoardColumn | None:
    """
    Decode one tagged column entry.

    Returns:
        The decoded column, or None for tags this tool does not use
        (Labels, Milestone, custom fields with numeric ids, ...)

    Raises:
        DecodeError: If the entry is not an object or carries no usable tag
    """
    if not isinstance(entry, dict):
        raise DecodeError(f"column entry is not an object: {type(entry).__name__}")

    tag = entry.get(TAG_FIELD)
    if isinstance(tag, bool) or not isinstance(tag, (str, int)):
        raise DecodeError(f"column entry has no classifiable {TAG_FIELD}: {tag!r}")

    decoder = COLUMN_DECODERS.get(tag) if isinstance(tag, str) else None
    if decoder is None:
        return None
    return decoder(entry.get(VALUE_FIELD))


def decode_item(raw: Any) -> BoardItem:
    """
    Decode one board item.

    Raises:
        DecodeError: If the item or its column list has the wrong shape
    """
    if not isinstance(raw, dict):
        raise DecodeError(f"item is not an object: {type(raw).__name__}")

    item_id = raw.get("id")
    if isinstance(item_id, bool) or not isinstance(item_id, (str, int)):
        item_id = None

    values = raw.get(COLUMN_VALUES_FIELD)
    if not isinstance(values, list):
        raise DecodeError(f"{COLUMN_VALUES_FIELD} is not a list", item_id=item_id)

    columns: list[BoardColumn] = []
    for entry in values:
        try:
            column = decode_column(entry)
        except DecodeError as e:
            raise DecodeError(e.reason, item_id=item_id) from e
        if column is not None:
            columns.append(column)

    return BoardItem(item_id=item_id, columns=tuple(columns))


def decode_items(raw_items: list[Any]) -> tuple[list[BoardItem], list[ItemDecodeFailure]]:
    """
    Decode every item, collecting failures instead of raising.

    Returns:
        (decoded items in input order, failures in input order)
    """
    items: list[BoardItem] = []
    failures: list[ItemDecodeFailure] = []

    for index, raw in enumerate(raw_items):
        try:
            items.append(decode_item(raw))
        except DecodeError as e:
            logger.warning("Skipping board item #%d: %s", index, e)
            failures.append(ItemDecodeFailure(index=index, item_id=e.item_id, reason=e.reason))

    return items, failures


def parse_status_options(raw_columns: Any) -> tuple[StatusOption, ...]:
    """
    Options of the Status column type, in board order.

    Missing Status column, settings or options yields no options; options
    without a usable id or name are skipped.
    """
    if not isinstance(raw_columns, list):
        return ()

    status = next(
        (
            c
            for c in raw_columns
            if isinstance(c, dict) and _as_id(c.get("id")) == STATUS_COLUMN_ID
        ),
        None,
    )
    if status is None:
        return ()

    settings = status.get("settings")
    options = settings.get("options") if isinstance(settings, dict) else None
    if not isinstance(options, list):
        return ()

    parsed: list[StatusOption] = []
    for option in options:
        if not isinstance(option, dict):
            continue
        option_id = _as_id(option.get("id"))
        name = option.get("name")
        if option_id is not None and isinstance(name, str):
            parsed.append(StatusOption(id=option_id, name=name))
    return tuple(parsed)


def decode_status_options(raw_columns: Any) -> dict[str, str]:
    """Build status id -> name; a repeated id keeps its last name."""
    return {option.id: option.name for option in parse_status_options(raw_columns)}


def load_json_array(text: str, source: str) -> list[Any]:
    """
    Parse a root-level JSON array.

    Raises:
        BoardDataError: If the text is not JSON or the root is not an array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BoardDataError(f"{source} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise BoardDataError(f"{source} must be a JSON array, got {type(data).__name__}")
    return data


def build_board(items_json: str, columns_json: str) -> BoardModel:
    """
    Build a BoardModel from the two raw JSON blobs.

    Args:
        items_json: Contents of #memex-items-data
        columns_json: Contents of #memex-columns-data

    Raises:
        BoardDataError: If either blob is unparseable at the root
    """
    raw_items = load_json_array(items_json, "memex-items-data")
    raw_columns = load_json_array(columns_json, "memex-columns-data")

    items, failures = decode_items(raw_items)
    return BoardModel(
        items=tuple(items),
        status_options=decode_status_options(raw_columns),
        decode_failures=tuple(failures),
    )
