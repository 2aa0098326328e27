from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout

from pixelpi.app.ui.preview import RasterPreview


class WorkArea(QWidget):
    """The main work area with a splitter between the side panels and the raster preview."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.side = QWidget(split)
        self.side_layout = QVBoxLayout(self.side)
        self.side_layout.setContentsMargins(0, 0, 0, 0)
        self.preview = RasterPreview(split)

        split.addWidget(self.side)
        split.addWidget(self.preview)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

    def add_panel(self, panel: QWidget) -> None:
        """Append a panel to the side column."""
        self.side_layout.addWidget(panel, 0)

    def finish_panels(self) -> None:
        self.side_layout.addStretch(1)
