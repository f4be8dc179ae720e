"""
Module: selection.gate

Purpose:
    SubmissionGate - validates that at least one dimension is selected before
    invoking the caller's continuation. A failed check is recovered locally:
    it is reported through SubmitResult and the advisory error message,
    never raised to the caller.

Key Classes:
    - SelectionError: Base class for selection validation errors
    - NoSelectionError: Submit attempted with an empty selection
    - SubmitResult: Outcome of a submit attempt
    - SubmissionGate: The gate itself

Error message state machine:
    Clear  --submit(empty)------> Shown
    Shown  --submit(empty)------> Shown     (message re-set)
    Shown  --toggle | set_all---> Clear     (cleared by SelectionStore)
    Clear  --submit(non-empty)--> Clear     (continuation invoked)

Used By:
    - selection.engine: Engine glue
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from assessment_toolkit.core.models import SelectionState

from .config import NO_SELECTION_MESSAGE

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Base class for selection validation errors."""
    pass


class NoSelectionError(SelectionError):
    """Submit attempted while no dimension is selected."""

    def __init__(self, message: str = NO_SELECTION_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of SubmissionGate.submit().

    Attributes:
        error: The validation error, None on success
    """

    error: Optional[SelectionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


class SubmissionGate:
    """
    Gate submission on a non-empty selection.

    This is the only place the error message is set to a non-empty value.

    Args:
        state: Caller-owned selection state
        continuation: Zero-argument callable invoked once per successful submit
    """

    def __init__(
        self,
        state: SelectionState,
        continuation: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = state
        self.continuation = continuation

    def validate(self) -> None:
        """
        Check the submit precondition.

        Raises:
            NoSelectionError: If no dimension is selected
        """
        if not self.state.selected_ids:
            raise NoSelectionError()

    def submit(self) -> SubmitResult:
        """
        Validate the selection and, if valid, invoke the continuation.

        Returns:
            SubmitResult; ``ok`` is False when nothing is selected
        """
        try:
            self.validate()
        except NoSelectionError as e:
            self.state.error_message = e.message
            logger.info("Submit rejected: no dimensions selected")
            return SubmitResult(error=e)

        self.state.clear_error()
        logger.info("Submit accepted with %d dimension(s)", len(self.state.selected_ids))
        if self.continuation is not None:
            self.continuation()
        return SubmitResult()
