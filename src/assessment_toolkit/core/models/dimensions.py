"""
Module: dimensions

Purpose:
    Provides the Dimension and Statement dataclasses - the input records the
    selection engine works over. A Dimension is a named grouping of
    assessment statements; statements are counted, never inspected.

Key Functions:
    - Dimension.statement_count: Number of statements (always calculated)
    - Dimension.is_top_level: True when the dimension has no parent

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.selection
    - selection.estimation
    - loading.parser
    - gui.widgets.dimension_selector
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Optional

logger = logging.getLogger(__name__)

DimensionId = Hashable


@dataclass(frozen=True)
class Statement:
    """
    Single assessment statement (immutable, opaque to the core).

    Attributes:
        id: Upstream identifier, if any
        text: Statement wording, if any

    Only the number of statements in a dimension matters for estimation;
    neither field is read by the selection engine.
    """

    id: Optional[Hashable] = None
    text: str = ""


@dataclass(frozen=True)
class Dimension:
    """
    Named grouping of assessment statements (immutable).

    Attributes:
        id: Unique identifier within the supplied list
        name: Display name like "Leadership"
        short_description: One-line description shown under the name
        statements: Statements belonging to this dimension
        parent_id: Id of the parent dimension, None for top-level dimensions

    Invariants:
        - statement_count is always len(statements), never stored
        - list order supplied by the host is display order; nothing re-sorts it

    Example:
        >>> dim = Dimension(id=1, name="Safety", statements=(Statement(), Statement()))
        >>> dim.statement_count
        2
    """

    id: DimensionId
    name: str
    short_description: str = ""
    statements: tuple[Statement, ...] = ()
    parent_id: Optional[DimensionId] = None

    def __post_init__(self) -> None:
        """Validate dimension on construction."""
        if self.id is None:
            raise ValueError("Dimension id must not be None")
        # Accept any iterable of statements but store a tuple so the record stays hashable.
        # Missing or malformed statements count as zero.
        statements = self.statements
        if not isinstance(statements, tuple):
            if statements is None or isinstance(statements, (str, bytes)) or not hasattr(statements, "__iter__"):
                logger.warning(
                    "Dimension %r has malformed statements (%s); counting as 0",
                    self.id, type(statements).__name__,
                )
                statements = ()
            object.__setattr__(self, "statements", tuple(statements))

    @property
    def statement_count(self) -> int:
        """Number of statements in this dimension."""
        return len(self.statements)

    @property
    def is_top_level(self) -> bool:
        """True if this dimension has no parent."""
        return self.parent_id is None

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Dimension({self.id!r}, {self.name!r}, statements={self.statement_count})"
