"""
Module: selection.store

Purpose:
    SelectionStore - membership operations over the caller-owned
    SelectionState. Every selection-changing operation also clears the
    advisory error message so a stale "nothing selected" error never
    survives a later change.

Key Classes:
    - SelectionStore: toggle / replace / clear over SelectionState

Dependencies:
    - core.models.selection: SelectionState

Used By:
    - selection.select_all: Bulk select/deselect
    - selection.engine: Engine glue
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Hashable, Iterable, Optional

from assessment_toolkit.core.models import SelectionState

logger = logging.getLogger(__name__)


class SelectionStore:
    """
    Holds the selected dimension ids by reference to a SelectionState.

    The store never copies the state: the host that passed the handle sees
    every replacement immediately.

    Example:
        >>> store = SelectionStore()
        >>> store.toggle(1)
        frozenset({1})
        >>> store.toggle(1)
        frozenset()
    """

    def __init__(self, state: Optional[SelectionState] = None) -> None:
        self.state = state if state is not None else SelectionState()

    @property
    def selected_ids(self) -> FrozenSet[Hashable]:
        return self.state.selected_ids

    def contains(self, dimension_id: Hashable) -> bool:
        return dimension_id in self.state.selected_ids

    def __len__(self) -> int:
        return len(self.state.selected_ids)

    def toggle(self, dimension_id: Hashable) -> FrozenSet[Hashable]:
        """
        Flip membership of one id.

        Total over any hashable id, including ids not in the dimension list.
        Clears the error message.

        Args:
            dimension_id: Id to add (if absent) or remove (if present)

        Returns:
            The new selected-id set
        """
        current = self.state.selected_ids
        if dimension_id in current:
            updated = current - {dimension_id}
            logger.debug("Deselected dimension %r", dimension_id)
        else:
            updated = current | {dimension_id}
            logger.debug("Selected dimension %r", dimension_id)
        self.state.selected_ids = updated
        self.state.clear_error()
        return updated

    def replace(self, dimension_ids: Iterable[Hashable]) -> FrozenSet[Hashable]:
        """
        Replace the whole selection with ``dimension_ids``.

        Clears the error message.
        """
        updated = frozenset(dimension_ids)
        self.state.selected_ids = updated
        self.state.clear_error()
        logger.debug("Selection replaced (%d ids)", len(updated))
        return updated

    def clear(self) -> FrozenSet[Hashable]:
        """Deselect everything. Clears the error message."""
        return self.replace(())
