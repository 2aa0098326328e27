from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QLabel, QLineEdit

from pixelpi.app.state import Store
from pixelpi.app.ui.panels.base import BasePanel
from pixelpi.model.estimation import PiEstimate

# Field key -> (label, format)
FIELDS = {
    "theoretical_perimeter": ("Theoretical perimeter:", "{:.4f}"),
    "theoretical_pi": ("Theoretical pi:", "{:.6f}"),
    "theoretical_area": ("Theoretical area:", "{:.4f}"),
    "perimeter_pixels": ("Perimeter pixels:", "{:d}"),
    "pi_from_perimeter": ("Pi from perimeter:", "{:.6f}"),
    "area_pixels": ("Practical area:", "{:d}"),
    "pi_from_area": ("Pi from area:", "{:.6f}"),
}


class ResultsPanel(BasePanel):
    """Read-only display of the theoretical and the pixel-counted values."""
    TITLE = "Results"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        self.fields: dict[str, QLineEdit] = {}
        for key, (label, _) in FIELDS.items():
            row = self._next_row()
            self.grid.addWidget(QLabel(self.tr(label), self.box), row, 0)
            edit = QLineEdit(self.box)
            edit.setReadOnly(True)
            self.grid.addWidget(edit, row, 1)
            self.fields[key] = edit

        self.store.estimate_changed.connect(self.show_estimate)

    @Slot(object)
    def show_estimate(self, estimate: PiEstimate | None) -> None:
        if estimate is None:
            for edit in self.fields.values():
                edit.clear()
            return

        for key, (_, fmt) in FIELDS.items():
            self.fields[key].setText(fmt.format(getattr(estimate, key)))
