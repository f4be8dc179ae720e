"""PySide6 front end for dimension selection."""
