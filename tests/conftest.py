import os
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import assessment_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from assessment_toolkit.core.models import Dimension, Statement


def _make_dimension(dimension_id, statement_count, name=None, **kwargs) -> Dimension:
    return Dimension(
        id=dimension_id,
        name=name or f"Dimension {dimension_id}",
        statements=tuple(Statement(id=i) for i in range(statement_count)),
        **kwargs,
    )


# Common test fixtures
@pytest.fixture
def make_dimension():
    """Factory: make_dimension(id, statement_count, name=None, **kwargs)."""
    return _make_dimension


@pytest.fixture
def two_dimensions():
    """Dimension 1 with two statements, dimension 2 with one."""
    return [_make_dimension(1, 2), _make_dimension(2, 1)]


@pytest.fixture
def four_dimensions():
    """Four dimensions with 3, 5, 0 and 8 statements."""
    return [
        _make_dimension("lead", 3, "Leadership"),
        _make_dimension("safe", 5, "Safety"),
        _make_dimension("empty", 0, "Empty"),
        _make_dimension("comm", 8, "Communication"),
    ]
