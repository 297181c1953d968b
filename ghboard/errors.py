"""
Exception hierarchy for ghboard.

Fatal errors abort the whole run (no partial board, no partial calendar).
Per-item and per-day defects never raise past the decoder/reconciler; they
are collected as diagnostics on the resulting model instead.

httpx.HTTPError is not wrapped: transport failures propagate as-is.
"""


class GhBoardError(Exception):
    """Base class for all ghboard errors."""

    pass


class PageStructureError(GhBoardError):
    """
    Raised when a fetched page lacks a required data anchor.

    Example: a project page with no #memex-items-data element, usually
    because the session cookies are stale and GitHub served a login page.
    """

    def __init__(self, anchor: str, detail: str = ""):
        self.anchor = anchor
        self.detail = detail
        message = f"Failed to find {anchor}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class BoardDataError(GhBoardError):
    """Raised when a board JSON blob cannot be parsed at the root level."""

    pass


class DecodeError(GhBoardError):
    """
    Raised when a single board item cannot be decoded at all.

    Only escapes decode_item(); decode_items() absorbs it per item.
    """

    def __init__(self, reason: str, item_id: object = None):
        self.reason = reason
        self.item_id = item_id
        if item_id is None:
            super().__init__(reason)
        else:
            super().__init__(f"item {item_id}: {reason}")
