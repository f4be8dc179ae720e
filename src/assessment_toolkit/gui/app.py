"""
Entry point for the dimension selection GUI.

Loads a dimensions JSON file, shows the selector and prints the chosen
dimension ids as JSON on stdout when the user starts the assessment.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assessment-select",
        description="Choose assessment dimensions and see the estimated completion time.",
    )
    parser.add_argument("dimensions", type=Path, help="JSON file with dimension records")
    parser.add_argument(
        "--top-level-only",
        action="store_true",
        help="Only offer dimensions that have no parent",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate every record against the JSON schema",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the GUI application.

    Returns:
        Process exit code: 0 after a submit or window close, 1 on load failure
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    from assessment_toolkit.loading import LoaderError, load_dimensions

    try:
        dimensions = load_dimensions(
            args.dimensions, strict=args.strict, top_level_only=args.top_level_only
        )
    except LoaderError as e:
        logger.error("Could not load dimensions: %s", e)
        return 1

    from PySide6.QtWidgets import QApplication
    from assessment_toolkit.gui.widgets.dimension_selector import DimensionSelector

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Assessment Toolkit")

    window = DimensionSelector(dimensions)
    window.setWindowTitle("Select Dimensions")
    window.resize(640, 720)

    def _on_submitted(selected_ids: list) -> None:
        print(json.dumps(selected_ids))
        window.close()

    window.submitted.connect(_on_submitted)
    window.show()
    return app.exec()


def main() -> int:
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
