from ghboard.parsers.board_columns import (
    build_board,
    decode_column,
    decode_item,
    decode_items,
    decode_status_options,
    parse_status_options,
)
from ghboard.parsers.contributions import (
    build_tooltip_index,
    human_date,
    ordinal_day,
    parse_tooltip,
    reconcile,
)

__all__ = [
    "build_board",
    "build_tooltip_index",
    "decode_column",
    "decode_item",
    "decode_items",
    "decode_status_options",
    "human_date",
    "ordinal_day",
    "parse_status_options",
    "parse_tooltip",
    "reconcile",
]
