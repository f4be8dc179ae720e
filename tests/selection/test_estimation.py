"""
Unit tests for completion-time estimation.
"""

import math

import pytest

from assessment_toolkit.core.models import Dimension
from assessment_toolkit.selection import (
    EstimationConfig,
    dimension_minutes,
    estimate_minutes,
    minutes_for_statements,
    statement_count,
    total_selected_statements,
)


class TestMinutesForStatements:
    """Tests for minutes_for_statements()."""

    @pytest.mark.parametrize(
        "count, expected",
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3), (119, 60), (120, 60)],
    )
    def test_minutes_when_count_given_then_rounds_up(self, count, expected):
        """Partial minutes always count as a full minute."""
        assert minutes_for_statements(count) == expected
        assert expected == math.ceil(30 * count / 60)

    def test_minutes_when_negative_count_then_returns_zero(self):
        assert minutes_for_statements(-4) == 0

    def test_minutes_when_custom_cost_then_uses_it(self):
        config = EstimationConfig(seconds_per_statement=45)
        # 3 * 45 = 135s -> 3 minutes
        assert minutes_for_statements(3, config) == 3


class TestEstimateMinutes:
    """Tests for estimate_minutes()."""

    def test_estimate_when_nothing_selected_then_returns_zero(self, two_dimensions):
        assert estimate_minutes(two_dimensions, frozenset()) == 0

    def test_estimate_when_all_selected_then_sums_statements(self, two_dimensions):
        # 3 statements * 30s = 90s -> 2 minutes
        assert estimate_minutes(two_dimensions, {1, 2}) == 2

    def test_estimate_when_single_statement_then_returns_one(self, two_dimensions):
        assert estimate_minutes(two_dimensions, {2}) == 1

    def test_estimate_when_unknown_id_selected_then_ignored(self, two_dimensions):
        """Ids not in the dimension list contribute nothing."""
        assert estimate_minutes(two_dimensions, {2, "missing"}) == 1

    def test_estimate_when_subsets_given_then_matches_formula(self, four_dimensions):
        """estimate == ceil(30 * selected statements / 60) for every subset."""
        ids = [d.id for d in four_dimensions]
        for mask in range(1 << len(ids)):
            selected = {ids[i] for i in range(len(ids)) if mask & (1 << i)}
            total = sum(d.statement_count for d in four_dimensions if d.id in selected)
            assert estimate_minutes(four_dimensions, selected) == math.ceil(30 * total / 60)

    def test_total_selected_statements_when_selected_then_counts(self, four_dimensions):
        assert total_selected_statements(four_dimensions, {"lead", "comm"}) == 11


class TestDimensionMinutes:
    """Tests for per-dimension estimates."""

    def test_dimension_minutes_when_three_statements_then_two_minutes(self, make_dimension):
        assert dimension_minutes(make_dimension(1, 3)) == 2

    def test_dimension_minutes_when_empty_then_zero(self, make_dimension):
        assert dimension_minutes(make_dimension(1, 0)) == 0


class TestStatementCount:
    """Tests for tolerant statement counting."""

    def test_statement_count_when_dimension_then_returns_length(self, make_dimension):
        assert statement_count(make_dimension(1, 4)) == 4

    def test_statement_count_when_missing_attribute_then_returns_zero(self):
        class Bare:
            id = 1
        assert statement_count(Bare()) == 0

    def test_statement_count_when_statements_none_then_returns_zero(self):
        class NoStatements:
            id = 1
            statements = None
        assert statement_count(NoStatements()) == 0

    def test_statement_count_when_unsized_then_returns_zero(self):
        class Unsized:
            id = 1
            statements = 7
        assert statement_count(Unsized()) == 0


class TestEstimationConfig:
    """Tests for EstimationConfig."""

    def test_init_when_default_then_thirty_seconds(self):
        assert EstimationConfig().seconds_per_statement == 30

    @pytest.mark.parametrize("seconds", [0, -30])
    def test_init_when_not_positive_then_raises_error(self, seconds):
        with pytest.raises(ValueError, match="seconds_per_statement must be positive"):
            EstimationConfig(seconds_per_statement=seconds)

    def test_seconds_for_when_negative_count_then_zero(self):
        assert EstimationConfig().seconds_for(-2) == 0
