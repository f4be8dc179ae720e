"""
Module: selection.engine

Purpose:
    SelectionEngine - ties SelectionStore, SelectAllCoordinator, the
    estimator and SubmissionGate together over one SelectionState.

    After every mutating operation the engine runs a single explicit,
    synchronous recompute step (select-all flag + estimated minutes) and only
    then notifies listeners, so nothing can read derived values that belong
    to an earlier selection/dimension pairing.

Key Classes:
    - SelectionEngine: Public entry point for hosts and the GUI

Dependencies:
    - core.models: Dimension, SelectionState, SelectionSnapshot
    - selection.store, selection.select_all, selection.estimation, selection.gate

Used By:
    - gui.widgets.dimension_selector
"""

from __future__ import annotations

import logging
from typing import Any, Callable, FrozenSet, Hashable, Iterable, List, Optional, Sequence

from assessment_toolkit.core.models import SelectionSnapshot, SelectionState

from .config import DEFAULT_CONFIG, EstimationConfig
from .estimation import dimension_minutes, estimate_minutes
from .gate import SubmissionGate, SubmitResult
from .select_all import SelectAllCoordinator
from .store import SelectionStore

logger = logging.getLogger(__name__)

Listener = Callable[[SelectionSnapshot], None]


def _checked_dimensions(dimensions: Iterable[Any]) -> tuple:
    """Materialise the dimension list, rejecting duplicate ids."""
    dimensions = tuple(dimensions)
    ids = [d.id for d in dimensions]
    if len(ids) != len(set(ids)):
        duplicates = sorted({repr(i) for i in ids if ids.count(i) > 1})
        raise ValueError(f"Duplicate dimension ids: {', '.join(duplicates)}")
    return dimensions


class SelectionEngine:
    """
    Selection & estimation engine over a caller-supplied dimension list.

    The engine never owns the dimension list (it keeps a tuple view of what
    the host supplied) and never owns the canonical selection: that lives in
    the SelectionState handle, which the host may share.

    Args:
        dimensions: Dimensions in display order
        state: Caller-owned selection state; a fresh one is created if None
        on_submit: Continuation invoked once per successful submit()
        config: Estimation configuration

    Example:
        >>> engine = SelectionEngine(dims, on_submit=start_assessment)
        >>> engine.set_all(True)
        >>> engine.estimated_minutes
        2
        >>> engine.submit().ok
        True
    """

    def __init__(
        self,
        dimensions: Iterable[Any] = (),
        state: Optional[SelectionState] = None,
        on_submit: Optional[Callable[[], None]] = None,
        config: EstimationConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.state = state if state is not None else SelectionState()
        self._dimensions: tuple = _checked_dimensions(dimensions)
        self._store = SelectionStore(self.state)
        self._select_all_coordinator = SelectAllCoordinator(self._store)
        self._gate = SubmissionGate(self.state, on_submit)
        self._listeners: List[Listener] = []

        self._select_all = False
        self._estimated_minutes = 0
        self._recompute()

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors (derived values are always current)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def dimensions(self) -> Sequence[Any]:
        return self._dimensions

    @property
    def selected_ids(self) -> FrozenSet[Hashable]:
        return self.state.selected_ids

    @property
    def selected_count(self) -> int:
        return len(self.state.selected_ids)

    @property
    def select_all(self) -> bool:
        return self._select_all

    @property
    def estimated_minutes(self) -> int:
        return self._estimated_minutes

    @property
    def error_message(self) -> str:
        return self.state.error_message

    @property
    def can_submit(self) -> bool:
        return self.selected_count > 0

    def is_selected(self, dimension_id: Hashable) -> bool:
        return self._store.contains(dimension_id)

    def minutes_for(self, dimension: Any) -> int:
        """Per-dimension estimate, independent of the selection."""
        return dimension_minutes(dimension, self.config)

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            selected_ids=self.state.selected_ids,
            select_all=self._select_all,
            estimated_minutes=self._estimated_minutes,
            error_message=self.state.error_message,
            dimension_count=len(self._dimensions),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Listeners
    # ─────────────────────────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        """Register a callable receiving a fresh snapshot after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ─────────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────────

    def toggle(self, dimension_id: Hashable) -> SelectionSnapshot:
        """Flip one id in the selection and clear the error message."""
        self._store.toggle(dimension_id)
        return self._changed()

    def set_all(self, select_all_requested: bool) -> SelectionSnapshot:
        """Select every dimension (True) or none (False); clears the error message."""
        self._select_all_coordinator.set_all(select_all_requested, self._dimensions)
        return self._changed()

    def replace_selection(self, dimension_ids: Iterable[Hashable]) -> SelectionSnapshot:
        """Replace the selection wholesale (e.g. restoring a host's choice)."""
        self._store.replace(dimension_ids)
        return self._changed()

    def set_dimensions(self, dimensions: Iterable[Any]) -> SelectionSnapshot:
        """
        Swap in a new dimension list.

        The selection is left untouched: ids no longer in the list are
        tolerated and simply contribute nothing to the estimate.
        """
        self._dimensions = _checked_dimensions(dimensions)
        logger.debug("Dimension list replaced (%d dimensions)", len(self._dimensions))
        return self._changed()

    def refresh(self) -> SelectionSnapshot:
        """Recompute after the host edited the shared SelectionState directly."""
        return self._changed()

    def submit(self) -> SubmitResult:
        """
        Gate submission on a non-empty selection.

        Invokes the continuation exactly once on success; otherwise sets the
        advisory error message. Never raises NoSelectionError.
        """
        result = self._gate.submit()
        self._changed()
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Recompute
    # ─────────────────────────────────────────────────────────────────────────

    def _recompute(self) -> None:
        self._select_all = self._select_all_coordinator.derive(self._dimensions)
        self._estimated_minutes = estimate_minutes(
            self._dimensions, self.state.selected_ids, self.config
        )

    def _changed(self) -> SelectionSnapshot:
        self._recompute()
        snapshot = self.snapshot()
        logger.debug("%r", snapshot)
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def __repr__(self) -> str:
        return f"SelectionEngine(dimensions={len(self._dimensions)}, {self.snapshot()!r})"
