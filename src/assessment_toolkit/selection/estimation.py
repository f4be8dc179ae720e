"""
Module: selection.estimation

Purpose:
    Pure functions deriving the estimated completion time, in whole minutes,
    from a dimension list and a set of selected ids.

Key Functions:
    - estimate_minutes(): Estimate for all selected dimensions
    - dimension_minutes(): Estimate for a single dimension (display)
    - total_selected_statements(): Statement count across selected dimensions
    - statement_count(): Tolerant statement count for one dimension

Formula:
    minutes = ceil(seconds_per_statement * statements / 60)

    Ceiling, never floor or round-to-nearest: a partial minute always counts
    as a full minute so the estimate never understates effort.

Dependencies:
    - selection.config: EstimationConfig

Used By:
    - selection.engine: Recompute step
    - selection.summary: Per-dimension text
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Hashable, Iterable

from .config import DEFAULT_CONFIG, SECONDS_PER_MINUTE, EstimationConfig

logger = logging.getLogger(__name__)


def statement_count(dimension: Any) -> int:
    """
    Count the statements of a dimension, tolerating malformed records.

    Missing, unsized or negative counts are treated as zero.

    Args:
        dimension: Dimension (or any object with a ``statements`` sequence)

    Returns:
        Non-negative statement count
    """
    statements = getattr(dimension, "statements", None)
    if statements is None:
        return 0
    try:
        count = len(statements)
    except TypeError:
        logger.warning(
            "Dimension %r has unsized statements (%s); counting as 0",
            getattr(dimension, "id", None),
            type(statements).__name__,
        )
        return 0
    return max(count, 0)


def minutes_for_statements(count: int, config: EstimationConfig = DEFAULT_CONFIG) -> int:
    """
    Convert a statement count into whole minutes, rounding up.

    Args:
        count: Number of statements
        config: Estimation configuration

    Returns:
        ceil(config.seconds_per_statement * count / 60), 0 for count <= 0

    Example:
        >>> minutes_for_statements(3)
        2
    """
    seconds = config.seconds_for(count)
    # Integer ceiling division
    return -(-seconds // SECONDS_PER_MINUTE)


def total_selected_statements(
    dimensions: Iterable[Any],
    selected_ids: AbstractSet[Hashable],
) -> int:
    """
    Sum statement counts of every dimension whose id is selected.

    Ids in ``selected_ids`` that match no dimension contribute nothing.
    """
    return sum(statement_count(d) for d in dimensions if d.id in selected_ids)


def estimate_minutes(
    dimensions: Iterable[Any],
    selected_ids: AbstractSet[Hashable],
    config: EstimationConfig = DEFAULT_CONFIG,
) -> int:
    """
    Estimate completion time for the selected dimensions.

    Args:
        dimensions: Dimension list in display order
        selected_ids: Ids of chosen dimensions
        config: Estimation configuration

    Returns:
        Estimated minutes (>= 0); 0 when nothing is selected

    Example:
        >>> dims = [Dimension(1, "A", statements=(s1, s2)), Dimension(2, "B", statements=(s1,))]
        >>> estimate_minutes(dims, {1, 2})
        2
    """
    total = total_selected_statements(dimensions, selected_ids)
    return minutes_for_statements(total, config)


def dimension_minutes(dimension: Any, config: EstimationConfig = DEFAULT_CONFIG) -> int:
    """
    Estimate completion time for a single dimension, independent of selection.

    Uses the same ceiling formula as estimate_minutes().
    """
    return minutes_for_statements(statement_count(dimension), config)
