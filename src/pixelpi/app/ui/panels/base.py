from __future__ import annotations

from PySide6.QtWidgets import QWidget, QGroupBox, QGridLayout, QVBoxLayout

from pixelpi.app.state import Store


class BasePanel(QWidget):
    """
    Base class for left-side panels.

    Holds a reference to the global store and a titled group box whose grid
    layout subclasses fill row by row.
    """
    TITLE: str = ""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        self.box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.box)
        self.grid = QGridLayout(self.box)
        self.grid.setVerticalSpacing(8)
        self._row = 0

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r
