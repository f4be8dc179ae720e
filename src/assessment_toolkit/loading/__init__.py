"""
Module: loading

Purpose:
    Dimension loading and parsing from JSON.

Key Functions:
    - load_dimensions(): Load dimensions from a JSON file
    - parse_dimensions(): Parse a decoded payload
    - parse_dimension_from_dict(): Parse a single record
    - top_level_dimensions(): Filter out child dimensions

Dependencies:
    - assessment_toolkit.core.models: Dimension, Statement
    - assessment_toolkit.core.schemas.validator: Record validation
"""

from .loader import LoaderError, load_dimensions, parse_dimensions, top_level_dimensions
from .parser import ParseError, parse_dimension_from_dict, parse_statements

__all__ = [
    "LoaderError",
    "load_dimensions",
    "parse_dimensions",
    "top_level_dimensions",
    "ParseError",
    "parse_dimension_from_dict",
    "parse_statements",
]
