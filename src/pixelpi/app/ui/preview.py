from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QImage, QPainter, QColor
from PySide6.QtWidgets import QWidget, QVBoxLayout

from pixelpi.config import FILL_RGBA, PERIMETER_PEN_COLOR
from pixelpi.model.surface import Surface

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Qt drawing surface
# -------------------------------------------------------------------------------

class QImageSurface(Surface):
    """
    Surface backed by a QImage and painted with QPainter.

    Antialiasing is disabled, so every painted pixel is fully opaque and every
    untouched pixel stays transparent.
    """
    FORMAT = QImage.Format.Format_RGBA8888

    def __init__(self, size: int = 0) -> None:
        self._image = QImage()
        self.clear(size)

    @property
    def size(self) -> int:
        return self._image.width()

    @property
    def image(self) -> QImage:
        return self._image

    def clear(self, size: int) -> None:
        size = self._check_size(size)
        if size == 0:
            self._image = QImage()
            return
        self._image = QImage(size, size, self.FORMAT)
        self._image.fill(Qt.GlobalColor.transparent)

    def fill_quarter_arc(self) -> None:
        n = self.size
        if n == 0:
            return

        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(*FILL_RGBA))
            # Centre on the bottom-right corner; Qt angles are counter-clockwise
            # in 1/16 degree, so 90..180 deg is the upper-left quadrant.
            painter.drawPie(QRectF(0.0, 0.0, 2.0 * n, 2.0 * n), 90 * 16, 90 * 16)
        finally:
            painter.end()

    def fill_all(self) -> None:
        if not self._image.isNull():
            self._image.fill(QColor(*FILL_RGBA))

    def rgba(self) -> npt.NDArray[np.uint8]:
        img = self._image
        if img.isNull():
            return np.zeros((0, 0, 4), dtype=np.uint8)

        w, h = img.width(), img.height()
        bits = img.constBits()
        # rows may be padded to bytesPerLine
        rows = np.frombuffer(bits, dtype=np.uint8, count=img.sizeInBytes()).reshape(h, img.bytesPerLine())
        return rows[:, : w * 4].reshape(h, w, 4).copy()

# -------------------------------------------------------------------------------
# Preview widget
# -------------------------------------------------------------------------------

class RasterPreview(QWidget):
    """
    pyqtgraph view of the rasterized quarter disc with:
      - one data unit per pixel and a locked aspect ratio,
      - screen orientation (y pointing down), as the raster is drawn,
      - the midpoint-circle perimeter pixels overlaid in colour.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot = pg.PlotWidget(self)
        self.plot.setAspectLocked(True)
        self.plot.getViewBox().invertY(True)
        self.plot.showGrid(x=True, y=True, alpha=0.2)
        self.plot.setLabel("bottom", "x", units="px")
        self.plot.setLabel("left", "y", units="px")
        layout.addWidget(self.plot)

        self._image_item = pg.ImageItem(axisOrder="row-major")
        self.plot.addItem(self._image_item)

        self._perimeter_item = pg.ScatterPlotItem(
            pxMode=False,
            symbol="s",
            size=1.0,
            pen=None,
            brush=pg.mkBrush(PERIMETER_PEN_COLOR),
        )
        self.plot.addItem(self._perimeter_item)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_preview(
        self,
        raster: npt.NDArray[np.uint8],
        perimeter_points: npt.NDArray[np.int64] | None = None
    ) -> None:
        """
        Show the given RGBA raster and optional perimeter pixels.

        Args:
            raster: (n, n, 4) uint8 buffer read back from the surface.
            perimeter_points: (N, 2) pixel coordinates; points outside the
                raster are not shown.
        """
        n = raster.shape[0]
        self._image_item.setImage(raster, levels=(0, 255), autoLevels=False)
        self._image_item.setRect(QRectF(0.0, 0.0, float(n), float(n)))

        if perimeter_points is not None and len(perimeter_points):
            inside = np.all((perimeter_points >= 0) & (perimeter_points < n), axis=1)
            pts = perimeter_points[inside] + 0.5
            self._perimeter_item.setData(x=pts[:, 0], y=pts[:, 1])
        else:
            self._perimeter_item.clear()

        self.plot.setRange(xRange=(0, n), yRange=(0, n), padding=0.02)

    def clear_preview(self) -> None:
        self._image_item.clear()
        self._perimeter_item.clear()
