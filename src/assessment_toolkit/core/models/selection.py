"""
Module: selection

Purpose:
    Provides SelectionState, the caller-owned handle holding the selected
    dimension ids and the advisory error message, and SelectionSnapshot, an
    immutable view of the selection plus its derived values.

Key Classes:
    - SelectionState: Mutable selected-id set + error message
    - SelectionSnapshot: Frozen view taken after each recompute

Dependencies:
    - dataclasses (std)

Used By:
    - selection.store, selection.gate, selection.engine
    - gui.widgets.dimension_selector
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable


@dataclass
class SelectionState:
    """
    Canonical selection state, owned by the host and mutated by the engine.

    The host creates (or lets the engine create) one SelectionState and may
    read it at any time. Every assignment to selected_ids, from the engine
    or the host, is stored as a new frozenset, so snapshots never share a
    mutable set with the host.

    Attributes:
        selected_ids: Ids of the currently chosen dimensions
        error_message: Advisory text from a failed submit, "" when clear
    """

    selected_ids: FrozenSet[Hashable] = field(default_factory=frozenset)
    error_message: str = ""

    def __setattr__(self, name: str, value) -> None:
        # Hosts may assign any iterable (e.g. a list); always store a frozen copy
        if name == "selected_ids" and not isinstance(value, frozenset):
            value = frozenset(value)
        super().__setattr__(name, value)

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)

    def clear_error(self) -> None:
        self.error_message = ""


@dataclass(frozen=True)
class SelectionSnapshot:
    """
    Immutable view of the selection and its derived values.

    Attributes:
        selected_ids: Ids chosen at the time of the snapshot
        select_all: Derived select-all flag
        estimated_minutes: Derived completion estimate
        error_message: Advisory text, "" when clear
        dimension_count: Length of the dimension list

    Invariants:
        - select_all == (dimension_count > 0 and selected_count == dimension_count)
        - estimated_minutes >= 0
    """

    selected_ids: FrozenSet[Hashable]
    select_all: bool
    estimated_minutes: int
    error_message: str
    dimension_count: int

    @property
    def selected_count(self) -> int:
        return len(self.selected_ids)

    @property
    def can_submit(self) -> bool:
        """True when at least one dimension is selected."""
        return self.selected_count > 0

    def __repr__(self) -> str:
        return (
            f"SelectionSnapshot(selected={self.selected_count}/{self.dimension_count}, "
            f"select_all={self.select_all}, minutes={self.estimated_minutes}, "
            f"error={self.error_message!r})"
        )
