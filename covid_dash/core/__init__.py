"""
Core domain layer: records and dataset, aggregation, selection state,
the cross-filter controller, view base class and the view registry
"""

from .aggregation import AggregationResult, aggregate
from .controller import CrossFilterController, FilteredRecords
from .dataset import Dataset, Dimension, Record
from .selection_state import SelectionState
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "AggregationResult",
    "aggregate",
    "CrossFilterController",
    "FilteredRecords",
    "Dataset",
    "Dimension",
    "Record",
    "SelectionState",
    "BaseView",
    "ViewRegistry",
]
