"""
Unit tests for dimension record validation.
"""

import pytest

from assessment_toolkit.core.schemas import ValidationError, validate_dimension


class TestValidateDimension:
    """Tests for validate_dimension()."""

    def test_validate_when_canonical_keys_then_passes(self):
        validate_dimension({"id": 1, "name": "Safety", "statements": []})

    def test_validate_when_api_keys_then_passes(self):
        validate_dimension({
            "id_dimensions": 7,
            "dimension_name": "Safety",
            "dimension_short_description": "How safe",
            "statements": [{"id": 1}],
        }, strict=True)

    def test_validate_when_not_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_dimension(["id", 1])

    def test_validate_when_missing_id_and_name_then_lists_both(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_dimension({"statements": []}, path="dims[0]")
        assert exc_info.value.errors == ["Missing field: id", "Missing field: name"]
        assert exc_info.value.path == "dims[0]"

    def test_validate_when_id_is_list_then_raises_error(self):
        with pytest.raises(ValidationError, match="Invalid dimension id"):
            validate_dimension({"id": [1], "name": "Safety"})

    def test_validate_when_statements_not_list_and_not_strict_then_passes(self):
        """Malformed statements are left for the parser to count as zero."""
        validate_dimension({"id": 1, "name": "Safety", "statements": 5})

    def test_validate_when_statements_not_list_and_strict_then_raises_error(self):
        with pytest.raises(ValidationError, match="Schema validation failed") as exc_info:
            validate_dimension({"id": 1, "name": "Safety", "statements": 5}, strict=True)
        assert exc_info.value.path == "statements"
