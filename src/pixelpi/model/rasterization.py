"""
Midpoint Circle Rasterization
=============================
Integer-only circle rasterization (Bresenham's midpoint algorithm).

The algorithm walks one octant of the circle, starting at (radius - 1, 0) and
moving towards the diagonal. Every visited point is mirrored into the other
seven octants, so each iteration plots exactly 8 pixels.

Exports:
    midpoint_circle_points: Generator of plotted (x, y) pixels.
    midpoint_circle_points_array: Same points as an (N, 2) array.
    count_perimeter_pixels: Number of pixels plotted for a circle.
"""
from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def _octant_points(x: int, y: int, x0: int, y0: int) -> tuple[tuple[int, int], ...]:
    return (
        (x + x0, y + y0),
        (y + x0, x + y0),
        (-x + x0, y + y0),
        (-y + x0, x + y0),
        (-x + x0, -y + y0),
        (-y + x0, -x + y0),
        (x + x0, -y + y0),
        (y + x0, -x + y0),
    )


def midpoint_circle_points(
    radius: int,
    center: tuple[int, int] = (0, 0)
) -> Iterator[tuple[int, int]]:
    """
    Yield the pixels plotted by the midpoint circle algorithm.

    Points are yielded in plotting order, eight per iteration. Points on the
    octant boundaries (x == y, or y == 0) are plotted more than once, exactly
    as a pixel-drawing rasterizer would.

    Args:
        radius: Circle radius in pixels. Zero or negative radii yield nothing.
        center: (x0, y0) pixel the circle is centred on.

    Yields:
        (x, y) pixel coordinates.
    """
    radius = int(radius)
    x0, y0 = center

    x = radius - 1
    y = 0
    dx = 1
    dy = 1
    decision_over_2 = dx - (radius << 1)

    while x >= y:
        yield from _octant_points(x, y, x0, y0)

        if decision_over_2 <= 0:
            # step y -> y + 1
            y += 1
            decision_over_2 += dy
            dy += 2

        if decision_over_2 > 0:
            # step y -> y + 1, x -> x - 1
            x -= 1
            dx += 2
            decision_over_2 += (-radius << 1) + dx


def midpoint_circle_points_array(
    radius: int,
    center: tuple[int, int] = (0, 0)
) -> npt.NDArray[np.int64]:
    """Return the plotted pixels as an (N, 2) integer array."""
    pts = list(midpoint_circle_points(radius, center))
    if not pts:
        return np.empty((0, 2), dtype=np.int64)
    return np.array(pts, dtype=np.int64)


def count_perimeter_pixels(radius: int) -> int:
    """
    Count the pixels the midpoint circle algorithm plots for a circle.

    Only the octant walk is performed; each iteration contributes 8 pixels.
    A radius of 0, or any negative radius, gives 0.
    """
    radius = int(radius)

    count = 0
    x = radius - 1
    y = 0
    dx = 1
    dy = 1
    decision_over_2 = dx - (radius << 1)

    while x >= y:
        count += 8

        if decision_over_2 <= 0:
            y += 1
            decision_over_2 += dy
            dy += 2

        if decision_over_2 > 0:
            x -= 1
            dx += 2
            decision_over_2 += (-radius << 1) + dx

    return count
