"""
Module: selection.config

Purpose:
    Configuration dataclass and constants for completion-time estimation
    and submission gating. Immutable configuration with validation on
    construction.

Key Classes:
    - EstimationConfig: Per-statement cost used by the estimator

Dependencies:
    - dataclasses (std)

Used By:
    - selection.estimation: Estimate calculation
    - selection.engine: Engine construction
    - selection.summary: Per-dimension display text
"""

from __future__ import annotations

from dataclasses import dataclass

# Business rules: each statement is budgeted at 30 seconds and partial
# minutes always round up.
SECONDS_PER_STATEMENT = 30
SECONDS_PER_MINUTE = 60

NO_SELECTION_MESSAGE = "Please select at least one dimension to continue."


@dataclass(frozen=True)
class EstimationConfig:
    """
    Configuration for completion-time estimation (immutable).

    Attributes:
        seconds_per_statement: Time budgeted for answering one statement

    Invariants:
        - seconds_per_statement > 0

    Example:
        >>> config = EstimationConfig()
        >>> config.seconds_for(3)
        90
    """

    seconds_per_statement: int = SECONDS_PER_STATEMENT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.seconds_per_statement <= 0:
            raise ValueError(
                f"seconds_per_statement must be positive: {self.seconds_per_statement}"
            )

    def seconds_for(self, statement_count: int) -> int:
        """
        Total seconds budgeted for a number of statements.

        Negative counts are treated as zero.
        """
        return max(statement_count, 0) * self.seconds_per_statement


DEFAULT_CONFIG = EstimationConfig()
