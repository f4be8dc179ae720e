"""
Module: loading.parser

Purpose:
    Parse raw dimension records (dicts from JSON) into Dimension objects.
    Accepts both canonical field names and the assessment API's names.

Key Functions:
    - parse_dimension_from_dict(): Single record -> Dimension
    - parse_statements(): Raw statements list -> tuple[Statement, ...]

Key Classes:
    - ParseError: Exception for parse failures

Field mapping:
    | Canonical           | Assessment API                 |
    |---------------------|--------------------------------|
    | id                  | id_dimensions                  |
    | name                | dimension_name                 |
    | short_description   | dimension_short_description    |
    | parent_id           | id_parent_dimension            |
    | statements          | statements                     |

Used By:
    - loading.loader: File loading
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from assessment_toolkit.core.models import Dimension, Statement
from assessment_toolkit.core.schemas.validator import ValidationError, validate_dimension

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error parsing a dimension record."""
    pass


def _first(data: Dict[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def parse_statements(raw: Any, *, source: str = "record") -> Tuple[Statement, ...]:
    """
    Convert a raw statements list into Statement objects.

    Statements are opaque: dict entries keep their id/text if present, any
    other entry becomes the statement text. A missing or non-list value
    yields no statements.

    Args:
        raw: Raw ``statements`` value
        source: Source identifier for log messages

    Returns:
        Tuple of Statement objects
    """
    if raw is None:
        logger.warning("No statements in %s; counting as 0", source)
        return ()
    if not isinstance(raw, list):
        logger.warning(
            "statements in %s is %s, not a list; counting as 0",
            source, type(raw).__name__,
        )
        return ()

    statements = []
    for item in raw:
        if isinstance(item, dict):
            statements.append(Statement(
                id=_first(item, "id", "id_statements"),
                text=str(_first(item, "text", "statement_text") or ""),
            ))
        else:
            statements.append(Statement(text=str(item)))
    return tuple(statements)


def parse_dimension_from_dict(
    data: Dict[str, Any],
    *,
    source: str = "JSON",
    strict: bool = False,
) -> Dimension:
    """
    Parse one dimension record.

    Args:
        data: Dict with dimension fields
        source: Source identifier for error messages
        strict: Validate against the full JSON schema first

    Returns:
        Dimension object

    Raises:
        ParseError: If id or name is missing, or the record fails validation

    Example:
        >>> dim = parse_dimension_from_dict({
        ...     "id_dimensions": 3,
        ...     "dimension_name": "Safety",
        ...     "statements": [{"id": 1}, {"id": 2}],
        ... })
        >>> dim.statement_count
        2
    """
    try:
        validate_dimension(data, strict=strict, path=source)
    except ValidationError as e:
        raise ParseError(f"Invalid dimension in {source}: {e}") from e

    dimension_id = _first(data, "id", "id_dimensions")
    name = str(_first(data, "name", "dimension_name"))
    return Dimension(
        id=dimension_id,
        name=name,
        short_description=str(_first(data, "short_description", "dimension_short_description") or ""),
        statements=parse_statements(data.get("statements"), source=source),
        parent_id=_first(data, "parent_id", "id_parent_dimension"),
    )
