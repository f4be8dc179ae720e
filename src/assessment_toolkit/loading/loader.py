"""
Module: loading.loader

Purpose:
    Load the dimension list for an assessment from a JSON file. Preserves
    the file's order, which is the display order of the selection screen.

Key Functions:
    - load_dimensions(): Load all dimensions from a file
    - parse_dimensions(): Parse an already-decoded JSON payload
    - top_level_dimensions(): Keep only dimensions without a parent

Key Classes:
    - LoaderError: Exception for loading failures

Accepted layouts:
    [ {...}, {...} ]                  plain list of records
    { "dimensions": [ {...}, ... ] }  wrapped list

Used By:
    - gui.app: Launcher
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

from assessment_toolkit.core.models import Dimension

from .parser import ParseError, parse_dimension_from_dict

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error loading dimensions."""
    pass


def top_level_dimensions(dimensions: Iterable[Dimension]) -> List[Dimension]:
    """Dimensions with no parent, in their original order."""
    return [d for d in dimensions if d.is_top_level]


def parse_dimensions(
    payload: Any,
    *,
    source: str = "JSON",
    strict: bool = False,
    top_level_only: bool = False,
) -> List[Dimension]:
    """
    Parse a decoded JSON payload into Dimension objects.

    Args:
        payload: List of records, or a dict with a "dimensions" list
        source: Source identifier for error messages
        strict: Validate each record against the JSON schema
        top_level_only: Drop dimensions that have a parent

    Returns:
        List of Dimension objects in payload order

    Raises:
        LoaderError: If the layout is wrong, a record is invalid,
            or two records share an id
    """
    if isinstance(payload, dict):
        if "dimensions" not in payload:
            raise LoaderError(f"Expected a 'dimensions' list in {source}")
        records = payload["dimensions"]
    else:
        records = payload

    if not isinstance(records, list):
        raise LoaderError(
            f"Expected a list of dimensions in {source}, got {type(records).__name__}"
        )

    dimensions: List[Dimension] = []
    seen_ids = set()
    for i, record in enumerate(records):
        try:
            dimension = parse_dimension_from_dict(record, source=f"{source}[{i}]", strict=strict)
        except ParseError as e:
            raise LoaderError(str(e)) from e
        if dimension.id in seen_ids:
            raise LoaderError(f"Duplicate dimension id {dimension.id!r} in {source}[{i}]")
        seen_ids.add(dimension.id)
        dimensions.append(dimension)

    if top_level_only:
        dimensions = top_level_dimensions(dimensions)
    return dimensions


def load_dimensions(
    path: Path,
    *,
    strict: bool = False,
    top_level_only: bool = False,
) -> List[Dimension]:
    """
    Load dimensions from a JSON file.

    Args:
        path: Path to the JSON file
        strict: Validate each record against the JSON schema
        top_level_only: Drop dimensions that have a parent

    Returns:
        List of Dimension objects in file order

    Raises:
        LoaderError: If the file is missing, not valid JSON, or has bad records

    Example:
        >>> dims = load_dimensions(Path("dimensions.json"), top_level_only=True)
        >>> [d.name for d in dims]
        ['Leadership', 'Safety']
    """
    path = Path(path)
    if not path.exists():
        raise LoaderError(f"Dimensions file does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path}: {e}") from e

    dimensions = parse_dimensions(
        payload, source=path.name, strict=strict, top_level_only=top_level_only
    )
    logger.info(
        "Loaded %d dimensions (%d statements) from %s",
        len(dimensions), sum(d.statement_count for d in dimensions), path,
    )
    return dimensions
