"""
Main Application Window
=======================
Radius input and results on the left, raster preview on the right.
"""
from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar

from pixelpi.app.application import VISIBLE_APP_NAME
from pixelpi.app.state import Store
from pixelpi.app.ui.panels.radius import RadiusPanel
from pixelpi.app.ui.panels.results import ResultsPanel
from pixelpi.app.ui.preview import QImageSurface
from pixelpi.app.ui.workarea import WorkArea
from pixelpi.model.estimation import PiEstimate
from pixelpi.model.rasterization import midpoint_circle_points_array


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 700)

        # Global store
        self.store = store if store is not None else Store(QImageSurface())

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.work_area = WorkArea(central)
        v.addWidget(self.work_area, 1)
        self.setCentralWidget(central)

        self.radius_panel = RadiusPanel(self.store, parent=self)
        self.results_panel = ResultsPanel(self.store, parent=self)
        self.work_area.add_panel(self.radius_panel)
        self.work_area.add_panel(self.results_panel)
        self.work_area.finish_panels()

        self.setStatusBar(QStatusBar(self))

        self.store.estimate_changed.connect(self._render_preview)
        self.store.error_occurred.connect(self._show_error)

        # Initial computation
        self.store.set_radius(self.radius_panel.radius())

    @Slot(object)
    def _render_preview(self, estimate: PiEstimate | None) -> None:
        preview = self.work_area.preview
        if estimate is None or self.store.raster is None:
            preview.clear_preview()
            return

        r = estimate.radius
        points = midpoint_circle_points_array(r, center=(r, r))
        preview.set_preview(self.store.raster, points)
        self.statusBar().showMessage(
            self.tr("Radius {r} px: {n} perimeter pixels, {a} area pixels").format(
                r=r, n=estimate.perimeter_pixels, a=estimate.area_pixels
            )
        )

    @Slot(str)
    def _show_error(self, message: str) -> None:
        self.statusBar().showMessage(message)
