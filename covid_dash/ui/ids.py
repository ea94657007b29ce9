from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        SELECTION_STATE = "selection-state"

    class Control:
        CLEAR_SELECTION_BTN = "clear-selection-btn"

        # Status bar
        RECORD_COUNT = "record-count"
        SELECTION_SUMMARY = "selection-summary"


def graph_id(view_id: str) -> str:
    """Graph component id for a registered view."""
    return f"graph-{view_id}"
