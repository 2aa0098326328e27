"""
Drawing Surfaces
================
A square RGBA pixel grid the quarter disc is rasterized onto.

Why is this file needed?
------------------------
The area estimate only needs a pixel buffer with per-pixel opacity. Keeping
the capability behind `Surface` lets the estimator run headless on a numpy
buffer (`ArraySurface`) or on a real Qt paint device (`QImageSurface` in
`pixelpi.app.ui.preview`) without knowing which one it got.

Classes:
    Surface: Abstract drawing surface.
    ArraySurface: numpy-backed surface filling pixels by their centre.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from pixelpi.config import OPAQUE_ALPHA, FILL_RGBA

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def count_opaque_pixels(rgba: npt.NDArray[np.uint8]) -> int:
    """
    Count the fully opaque pixels of an RGBA buffer.

    Args:
        rgba: Array of shape (height, width, 4) with 8-bit channels.

    Returns:
        Number of pixels whose alpha channel equals 255.
    """
    buf = np.asarray(rgba)
    if buf.ndim != 3 or buf.shape[2] != 4:
        raise ValueError(f"Expected an (h, w, 4) RGBA buffer, got shape {buf.shape}.")
    return int(np.count_nonzero(buf[:, :, 3] == OPAQUE_ALPHA))


class Surface(ABC):
    """A square drawing target with per-pixel opacity read-back."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Side of the square grid in pixels."""

    @abstractmethod
    def clear(self, size: int) -> None:
        """Resize to `size` x `size` and make every pixel transparent."""

    @abstractmethod
    def fill_quarter_arc(self) -> None:
        """
        Fill the quarter disc of radius `size` centred on the bottom-right corner.

        The arc spans the angle pi to -pi/2 in screen coordinates (y pointing
        down), i.e. the whole upper-left quadrant around the corner.
        """

    @abstractmethod
    def fill_all(self) -> None:
        """Make every pixel opaque."""

    @abstractmethod
    def rgba(self) -> npt.NDArray[np.uint8]:
        """Return a (size, size, 4) uint8 copy of the pixel buffer."""

    def opaque_pixel_count(self) -> int:
        return count_opaque_pixels(self.rgba())

    @staticmethod
    def _check_size(size: int) -> int:
        size = int(size)
        if size < 0:
            raise ValueError(f"Surface size must be non-negative, got {size}.")
        return size


class ArraySurface(Surface):
    """
    In-memory surface backed by a numpy array.

    A pixel belongs to the quarter disc when its centre lies within `size`
    of the bottom-right corner, which is how an aliased rasterizer fills.
    """

    def __init__(self, size: int = 0) -> None:
        self._buffer: npt.NDArray[np.uint8] = np.zeros((0, 0, 4), dtype=np.uint8)
        self.clear(size)

    @property
    def size(self) -> int:
        return self._buffer.shape[0]

    def clear(self, size: int) -> None:
        size = self._check_size(size)
        self._buffer = np.zeros((size, size, 4), dtype=np.uint8)

    def fill_quarter_arc(self) -> None:
        n = self.size
        if n == 0:
            return

        centres = np.arange(n, dtype=np.float64) + 0.5
        dx = n - centres[np.newaxis, :]
        dy = n - centres[:, np.newaxis]
        mask = dx * dx + dy * dy <= float(n) * n

        self._buffer[mask] = FILL_RGBA
        logger.debug(f"Filled quarter arc on {n}x{n} array surface ({int(mask.sum())} px).")

    def fill_all(self) -> None:
        self._buffer[:, :] = FILL_RGBA

    def rgba(self) -> npt.NDArray[np.uint8]:
        return self._buffer.copy()
