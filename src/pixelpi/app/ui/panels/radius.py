from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QLabel, QDoubleSpinBox, QSizePolicy

from pixelpi.app.state import Store
from pixelpi.app.ui.panels.base import BasePanel
from pixelpi.config import DEFAULT_RADIUS, MIN_RADIUS, MAX_RADIUS


class RadiusPanel(BasePanel):
    """The single input of the application: the circle radius in pixels."""
    TITLE = "Circle"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        row = self._next_row()
        self.grid.addWidget(QLabel(self.tr("Radius:"), self.box), row, 0)

        self.spin_radius = QDoubleSpinBox(self.box)
        self.spin_radius.setRange(MIN_RADIUS, MAX_RADIUS)
        self.spin_radius.setDecimals(0)
        self.spin_radius.setSingleStep(10)
        self.spin_radius.setValue(DEFAULT_RADIUS)
        self.spin_radius.setKeyboardTracking(False)
        self.spin_radius.setSuffix(" px")
        self.spin_radius.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(self.spin_radius, row, 1)

        self.spin_radius.valueChanged.connect(self._on_changed)

    def radius(self) -> float:
        return self.spin_radius.value()

    @Slot(float)
    def _on_changed(self, value: float) -> None:
        self.store.set_radius(value)
