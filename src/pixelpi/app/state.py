from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from pixelpi.config import DEFAULT_RADIUS
from pixelpi.model.estimation import InvalidRadiusError, PiEstimate, estimate_pi

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt
    from pixelpi.model.surface import Surface

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store for the current radius and its estimate.

    Every radius change recomputes everything on the given surface; nothing
    is carried over from the previous radius.
    """
    estimate_changed = Signal(object)
    error_occurred = Signal(str)

    def __init__(self, surface: Surface) -> None:
        super().__init__()
        self.surface = surface
        self.radius: float = float(DEFAULT_RADIUS)
        self.estimate: PiEstimate | None = None
        self.raster: npt.NDArray[np.uint8] | None = None

    def set_radius(self, value: float) -> None:
        self.radius = value
        try:
            estimate = estimate_pi(value, surface=self.surface)
        except InvalidRadiusError as e:
            logger.warning(f"Rejected radius {value!r}: {e}")
            self.estimate = None
            self.raster = None
            self.estimate_changed.emit(None)
            self.error_occurred.emit(str(e))
            return

        self.estimate = estimate
        self.raster = self.surface.rgba()
        logger.info(
            f"r={estimate.radius}: pi ~ {estimate.pi_from_perimeter:.5f} (perimeter), "
            f"{estimate.pi_from_area:.5f} (area)"
        )
        self.estimate_changed.emit(estimate)
