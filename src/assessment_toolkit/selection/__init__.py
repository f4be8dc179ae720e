"""
Module: selection

Purpose:
    Dimension selection, select-all coordination, completion-time
    estimation and submission gating.

Key Functions:
    - estimate_minutes(): Estimate for selected dimensions
    - dimension_minutes(): Estimate for a single dimension
    - is_all_selected(): Select-all derivation rule

Key Classes:
    - SelectionEngine: Main entry point
    - SelectionStore: Toggle / bulk set
    - SelectAllCoordinator: Select all / none
    - SubmissionGate: Non-empty selection check
    - EstimationConfig: Per-statement cost

Used By:
    - assessment_toolkit.gui: GUI integration
"""

from .config import EstimationConfig, NO_SELECTION_MESSAGE, SECONDS_PER_STATEMENT
from .engine import SelectionEngine
from .estimation import (
    dimension_minutes,
    estimate_minutes,
    minutes_for_statements,
    statement_count,
    total_selected_statements,
)
from .gate import NoSelectionError, SelectionError, SubmissionGate, SubmitResult
from .select_all import SelectAllCoordinator, is_all_selected
from .store import SelectionStore

__all__ = [
    "EstimationConfig",
    "NO_SELECTION_MESSAGE",
    "SECONDS_PER_STATEMENT",
    "SelectionEngine",
    "dimension_minutes",
    "estimate_minutes",
    "minutes_for_statements",
    "statement_count",
    "total_selected_statements",
    "NoSelectionError",
    "SelectionError",
    "SubmissionGate",
    "SubmitResult",
    "SelectAllCoordinator",
    "is_all_selected",
    "SelectionStore",
]
