"""
Module: selection.select_all

Purpose:
    Keeps the "select all" control consistent with individual choices and
    implements the bulk select/deselect action.

Key Functions:
    - is_all_selected(): Derivation rule for the select-all flag

Key Classes:
    - SelectAllCoordinator: Bulk set over a SelectionStore

Derivation rule:
    flag = len(dimensions) > 0 and len(selected_ids) == len(dimensions)

    An empty dimension list never yields a vacuous True.

Used By:
    - selection.engine: Recompute step and set_all()
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, FrozenSet, Hashable, Sequence

from .store import SelectionStore

logger = logging.getLogger(__name__)


def is_all_selected(dimensions: Sequence[Any], selected_ids: AbstractSet[Hashable]) -> bool:
    """
    Derive the select-all flag.

    Args:
        dimensions: Current dimension list
        selected_ids: Current selection

    Returns:
        True iff the list is non-empty and the selection size equals its length
    """
    return len(dimensions) > 0 and len(selected_ids) == len(dimensions)


class SelectAllCoordinator:
    """
    Bulk select/deselect over a SelectionStore.

    This is a discrete bulk operation, not a toggle of individual items:
    set_all(True) always yields every id in the list, set_all(False) always
    yields an empty selection, whatever the prior state.
    """

    def __init__(self, store: SelectionStore) -> None:
        self.store = store

    def set_all(self, select_all_requested: bool, dimensions: Sequence[Any]) -> FrozenSet[Hashable]:
        """
        Select every dimension or none. Clears the error message.

        Args:
            select_all_requested: True to select all, False to deselect all
            dimensions: Current dimension list

        Returns:
            The new selected-id set
        """
        if select_all_requested:
            logger.debug("Selecting all %d dimensions", len(dimensions))
            return self.store.replace(d.id for d in dimensions)
        logger.debug("Deselecting all dimensions")
        return self.store.clear()

    def derive(self, dimensions: Sequence[Any]) -> bool:
        """Select-all flag for the store's current selection."""
        return is_all_selected(dimensions, self.store.selected_ids)
