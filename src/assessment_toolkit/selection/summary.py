"""
Module: selection.summary

Purpose:
    User-facing strings for the dimension selection screen: per-dimension
    metadata, the estimate summary and the selected-count line.

Key Functions:
    - format_dimension_title(): "1. Leadership"
    - format_dimension_meta(): "3 questions • ~2 min"
    - format_estimate(): "-" or "~5 minutes"
    - format_selected_count(): "2 dimensions selected"
    - format_select_all_label(): "Select All Dimensions (4)"

Used By:
    - gui.widgets.dimension_selector
"""

from __future__ import annotations

from typing import Any

from assessment_toolkit.core.models import SelectionSnapshot

from .config import DEFAULT_CONFIG, EstimationConfig
from .estimation import dimension_minutes, statement_count

NO_ESTIMATE = "-"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_dimension_title(index: int, dimension: Any) -> str:
    """Numbered title; ``index`` is zero-based, the label is one-based."""
    return f"{index + 1}. {dimension.name}"


def format_dimension_meta(dimension: Any, config: EstimationConfig = DEFAULT_CONFIG) -> str:
    count = statement_count(dimension)
    return f"{_plural(count, 'question')} • ~{dimension_minutes(dimension, config)} min"


def format_estimate(snapshot: SelectionSnapshot) -> str:
    """Estimate summary; a dash while nothing is selected."""
    if snapshot.selected_count == 0:
        return NO_ESTIMATE
    return f"~{snapshot.estimated_minutes} minutes"


def format_selected_count(count: int) -> str:
    return f"{_plural(count, 'dimension')} selected"


def format_select_all_label(total: int) -> str:
    return f"Select All Dimensions ({total})"
