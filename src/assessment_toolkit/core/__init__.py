"""
Assessment Toolkit Core Package

Shared data models and validation used by the selection engine, the loader
and the GUI.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - `Dimension` and `Statement` are frozen dataclasses supplied by the host.
   - The engine never edits or re-sorts the dimension list.

2. **Calculated Values (Never Stored)**
   - Statement counts come from `len(statements)`.
   - Select-all flag and estimate are derived in `selection`, not stored here.

3. **Single Selection State**
   - `SelectionState` is the one mutable handle for selected ids and the
     advisory error message.
"""

from .models import Dimension, Statement, SelectionState, SelectionSnapshot

__all__ = [
    "Dimension",
    "Statement",
    "SelectionState",
    "SelectionSnapshot",
]
