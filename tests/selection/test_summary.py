"""
Unit tests for selection screen display strings.
"""

from assessment_toolkit.core.models import SelectionSnapshot
from assessment_toolkit.selection.summary import (
    format_dimension_meta,
    format_dimension_title,
    format_estimate,
    format_select_all_label,
    format_selected_count,
)


class TestDimensionText:
    """Tests for per-dimension strings."""

    def test_title_when_first_dimension_then_numbered_from_one(self, make_dimension):
        assert format_dimension_title(0, make_dimension(9, 1, "Safety")) == "1. Safety"

    def test_meta_when_one_statement_then_singular(self, make_dimension):
        assert format_dimension_meta(make_dimension(1, 1)) == "1 question • ~1 min"

    def test_meta_when_several_statements_then_plural_and_rounded_up(self, make_dimension):
        assert format_dimension_meta(make_dimension(1, 3)) == "3 questions • ~2 min"

    def test_meta_when_no_statements_then_zero(self, make_dimension):
        assert format_dimension_meta(make_dimension(1, 0)) == "0 questions • ~0 min"


class TestSummaryText:
    """Tests for the estimate summary strings."""

    def test_estimate_when_nothing_selected_then_dash(self):
        snap = SelectionSnapshot(frozenset(), False, 0, "", 2)
        assert format_estimate(snap) == "-"

    def test_estimate_when_selected_then_minutes(self):
        snap = SelectionSnapshot(frozenset({1, 2}), True, 2, "", 2)
        assert format_estimate(snap) == "~2 minutes"

    def test_selected_count_when_one_then_singular(self):
        assert format_selected_count(1) == "1 dimension selected"

    def test_selected_count_when_zero_then_plural(self):
        assert format_selected_count(0) == "0 dimensions selected"

    def test_select_all_label_when_total_then_includes_count(self):
        assert format_select_all_label(4) == "Select All Dimensions (4)"
