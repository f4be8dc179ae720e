"""
Unit tests for loading dimensions from JSON files.
"""

import json

import pytest

from assessment_toolkit.loading import (
    LoaderError,
    load_dimensions,
    parse_dimensions,
    top_level_dimensions,
)


@pytest.fixture
def records():
    return [
        {"id_dimensions": 2, "dimension_name": "Safety", "statements": [{}, {}]},
        {"id_dimensions": 1, "dimension_name": "Leadership", "statements": [{}]},
        {"id_dimensions": 5, "dimension_name": "Sub", "id_parent_dimension": 1, "statements": [{}]},
    ]


@pytest.fixture
def dimensions_file(tmp_path, records):
    path = tmp_path / "dimensions.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestLoadDimensions:
    """Tests for load_dimensions()."""

    def test_load_when_list_file_then_preserves_order(self, dimensions_file):
        dims = load_dimensions(dimensions_file)
        assert [d.id for d in dims] == [2, 1, 5]
        assert [d.statement_count for d in dims] == [2, 1, 1]

    def test_load_when_wrapped_file_then_reads_dimensions_key(self, tmp_path, records):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"dimensions": records}), encoding="utf-8")
        assert len(load_dimensions(path)) == 3

    def test_load_when_top_level_only_then_drops_children(self, dimensions_file):
        dims = load_dimensions(dimensions_file, top_level_only=True)
        assert [d.id for d in dims] == [2, 1]

    def test_load_when_missing_file_then_raises_error(self, tmp_path):
        with pytest.raises(LoaderError, match="does not exist"):
            load_dimensions(tmp_path / "nope.json")

    def test_load_when_invalid_json_then_raises_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LoaderError, match="Invalid JSON"):
            load_dimensions(path)

    def test_load_when_strict_and_valid_then_passes(self, dimensions_file):
        assert len(load_dimensions(dimensions_file, strict=True)) == 3


class TestParseDimensions:
    """Tests for parse_dimensions()."""

    def test_parse_when_duplicate_ids_then_raises_error(self):
        payload = [{"id": 1, "name": "A"}, {"id": 1, "name": "B"}]
        with pytest.raises(LoaderError, match="Duplicate dimension id 1"):
            parse_dimensions(payload)

    def test_parse_when_bad_record_then_reports_index(self):
        payload = [{"id": 1, "name": "A"}, {"id": 2}]
        with pytest.raises(LoaderError, match=r"JSON\[1\]"):
            parse_dimensions(payload)

    def test_parse_when_dict_without_dimensions_then_raises_error(self):
        with pytest.raises(LoaderError, match="'dimensions' list"):
            parse_dimensions({"items": []})

    def test_parse_when_not_list_then_raises_error(self):
        with pytest.raises(LoaderError, match="Expected a list"):
            parse_dimensions({"dimensions": "x"})

    def test_top_level_dimensions_when_mixed_then_keeps_roots(self, make_dimension):
        dims = [make_dimension(1, 1), make_dimension(2, 1, parent_id=1), make_dimension(3, 1)]
        assert [d.id for d in top_level_dimensions(dims)] == [1, 3]
