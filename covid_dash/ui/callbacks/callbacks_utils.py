from __future__ import annotations
import logging
from typing import Any, Optional

from covid_dash.core.selection_state import SelectionState

logger = logging.getLogger(__name__)


def try_parse_selection_state(data: object) -> Optional[SelectionState]:
    """Parse the stored selection; None (and a logged error) when it is malformed."""
    if data is None:
        return SelectionState()
    if not isinstance(data, dict):
        logger.error("Invalid selection-state: %r", data)
        return None
    try:
        return SelectionState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid selection-state: %r", data)
        return None


def clicked_value(click_data: Any, field: str) -> Optional[str]:
    """
    Pull the clicked category out of a dcc.Graph clickData payload.
    Pie slices report it under 'label', bars under 'x'.
    """
    if not isinstance(click_data, dict):
        return None
    points = click_data.get("points") or []
    if not points or not isinstance(points[0], dict):
        return None
    value = points[0].get(field)
    return None if value is None else str(value)
