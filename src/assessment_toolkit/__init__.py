"""Top-level package for the Assessment Toolkit.

Provides subpackages:
- assessment_toolkit.core – dimension/statement models and schema validation
- assessment_toolkit.selection – selection, select-all, estimation and submission
- assessment_toolkit.loading – reading dimension records from JSON
- assessment_toolkit.gui – PySide6 dimension selector
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("assessment_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
