"""
Dimension selector for the assessment start screen.
Displays dimensions with checkboxes, a synced "Select All" control, the
estimated completion time and a submit button.

All state lives in the SelectionEngine; the widget only forwards user
actions to it and re-renders from the snapshot it publishes.
"""
import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox, QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea,
    QVBoxLayout, QWidget
)

from assessment_toolkit.core.models import SelectionSnapshot, SelectionState
from assessment_toolkit.gui.styles.theme import Styles
from assessment_toolkit.selection import EstimationConfig, SelectionEngine
from assessment_toolkit.selection.config import DEFAULT_CONFIG
from assessment_toolkit.selection.summary import (
    format_dimension_meta,
    format_dimension_title,
    format_estimate,
    format_select_all_label,
    format_selected_count,
)

logger = logging.getLogger(__name__)


class DimensionSelector(QWidget):
    """
    Dimension selector widget backed by a SelectionEngine.

    Signals:
        selectionChanged: Emitted after every render caused by a state change
        submitted(list): Emitted once per successful submit with the selected
            ids in display order
    """

    selectionChanged = Signal()
    submitted = Signal(list)

    def __init__(
        self,
        dimensions: Iterable[Any] = (),
        state: Optional[SelectionState] = None,
        config: EstimationConfig = DEFAULT_CONFIG,
        parent=None,
    ):
        super().__init__(parent)

        self.engine = SelectionEngine(
            dimensions, state=state, on_submit=self._on_engine_submit, config=config
        )

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(12)

        title = QLabel("Select Dimensions for Assessment")
        title.setStyleSheet(Styles.TITLE)
        self.layout.addWidget(title)

        intro = QLabel(
            "Choose which dimensions you would like to answer. You can select one "
            "or more dimensions based on your project's needs."
        )
        intro.setWordWrap(True)
        self.layout.addWidget(intro)

        # --- Select All ---
        self.select_all_cb = QCheckBox()
        self.select_all_cb.setStyleSheet(Styles.SELECT_ALL)
        self.select_all_cb.toggled.connect(self._on_select_all_toggled)
        self.layout.addWidget(self.select_all_cb)

        # --- Dimension list ---
        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(8)
        self.list_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self.list_container)
        self.layout.addWidget(scroll, 1)

        # --- Estimate summary ---
        estimate_panel = QFrame()
        estimate_panel.setStyleSheet(Styles.ESTIMATE_PANEL)
        panel_layout = QVBoxLayout(estimate_panel)
        row = QHBoxLayout()
        row.addWidget(QLabel("<b>Estimated completion time:</b>"))
        row.addStretch()
        self.estimate_label = QLabel()
        row.addWidget(self.estimate_label)
        panel_layout.addLayout(row)
        self.count_label = QLabel()
        panel_layout.addWidget(self.count_label)
        self.layout.addWidget(estimate_panel)

        # --- Error + submit ---
        self.error_label = QLabel()
        self.error_label.setStyleSheet(Styles.ERROR_LABEL)
        self.error_label.setVisible(False)
        self.layout.addWidget(self.error_label)

        self.submit_button = QPushButton("Start Assessment")
        self.submit_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.submit_button.clicked.connect(self._on_submit_clicked)
        button_row = QHBoxLayout()
        button_row.addStretch()
        button_row.addWidget(self.submit_button)
        self.layout.addLayout(button_row)

        # State tracking (widgets only; selection lives in the engine)
        self.dimension_checkboxes: Dict[Hashable, QCheckBox] = {}
        self.dimension_cards: Dict[Hashable, QFrame] = {}

        self._populate_dimensions()
        self.engine.add_listener(self._render)
        self._render(self.engine.snapshot())

    def set_dimensions(self, dimensions: Iterable[Any]) -> None:
        """Replace the dimension list and rebuild the checkboxes."""
        self._clear_dimensions()
        dimensions = list(dimensions)
        # Build widgets first so the engine's notification renders the new list
        self._populate_dimensions(dimensions)
        self.engine.set_dimensions(dimensions)

    def get_selected_ids(self) -> List[Hashable]:
        """Selected ids in display order."""
        return [d.id for d in self.engine.dimensions if self.engine.is_selected(d.id)]

    def _clear_dimensions(self):
        """Remove all dimension cards, keeping the trailing stretch."""
        for card in self.dimension_cards.values():
            self.list_layout.removeWidget(card)
            card.deleteLater()
        self.dimension_checkboxes.clear()
        self.dimension_cards.clear()

    def _populate_dimensions(self, dimensions: Optional[List[Any]] = None):
        """Create one card per dimension, in display order."""
        if dimensions is None:
            dimensions = list(self.engine.dimensions)
        for index, dimension in enumerate(dimensions):
            card = QFrame()
            card.setStyleSheet(Styles.DIMENSION_CARD)
            card_layout = QVBoxLayout(card)

            cb = QCheckBox(format_dimension_title(index, dimension))
            cb.toggled.connect(lambda checked, d=dimension.id: self._on_dimension_toggled(d))
            card_layout.addWidget(cb)

            if dimension.short_description:
                description = QLabel(dimension.short_description)
                description.setWordWrap(True)
                card_layout.addWidget(description)

            meta = QLabel(format_dimension_meta(dimension, self.engine.config))
            meta.setStyleSheet(Styles.DIMENSION_META)
            card_layout.addWidget(meta)

            # Insert above the stretch
            self.list_layout.insertWidget(self.list_layout.count() - 1, card)
            self.dimension_checkboxes[dimension.id] = cb
            self.dimension_cards[dimension.id] = card

    def _on_dimension_toggled(self, dimension_id: Hashable):
        self.engine.toggle(dimension_id)

    def _on_select_all_toggled(self, checked: bool):
        self.engine.set_all(checked)

    def _on_submit_clicked(self):
        self.engine.submit()

    def _on_engine_submit(self):
        selected = self.get_selected_ids()
        logger.info("Starting assessment with dimensions %s", selected)
        self.submitted.emit(selected)

    def _render(self, snapshot: SelectionSnapshot):
        """Sync every control with the engine snapshot."""
        self.select_all_cb.blockSignals(True)
        self.select_all_cb.setText(format_select_all_label(snapshot.dimension_count))
        self.select_all_cb.setChecked(snapshot.select_all)
        self.select_all_cb.blockSignals(False)

        for dimension_id, cb in self.dimension_checkboxes.items():
            is_selected = dimension_id in snapshot.selected_ids
            cb.blockSignals(True)
            cb.setChecked(is_selected)
            cb.blockSignals(False)
            self.dimension_cards[dimension_id].setStyleSheet(
                Styles.DIMENSION_CARD_SELECTED if is_selected else Styles.DIMENSION_CARD
            )

        self.estimate_label.setText(format_estimate(snapshot))
        self.count_label.setText(format_selected_count(snapshot.selected_count))

        self.error_label.setText(snapshot.error_message)
        self.error_label.setVisible(bool(snapshot.error_message))

        self.submit_button.setEnabled(snapshot.can_submit)
        self.selectionChanged.emit()
