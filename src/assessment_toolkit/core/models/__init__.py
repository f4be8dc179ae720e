"""
Core Models Package

| Type | Mutability | Role |
|------|------------|------|
| `Statement` | frozen | Opaque unit of work, counted only |
| `Dimension` | frozen | Named group of statements a user can opt into |
| `SelectionState` | mutable | Caller-owned selected ids + error message |
| `SelectionSnapshot` | frozen | Derived view taken after each recompute |
"""

from .dimensions import Dimension, Statement
from .selection import SelectionState, SelectionSnapshot

__all__ = [
    "Dimension",
    "Statement",
    "SelectionState",
    "SelectionSnapshot",
]
