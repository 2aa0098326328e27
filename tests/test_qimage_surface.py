import math

import pytest

from pixelpi.model.estimation import estimate_circle_area, estimate_pi
from pixelpi.model.surface import ArraySurface


@pytest.fixture
def surface(qapp):
    from pixelpi.app.ui.preview import QImageSurface
    return QImageSurface()


def test_new_surface_is_empty(surface):
    assert surface.size == 0
    assert surface.rgba().shape == (0, 0, 4)
    assert surface.opaque_pixel_count() == 0


def test_clear_makes_transparent_square(surface):
    surface.clear(33)
    assert surface.size == 33
    buf = surface.rgba()
    assert buf.shape == (33, 33, 4)
    assert surface.opaque_pixel_count() == 0


def test_clear_rejects_negative_size(surface):
    with pytest.raises(ValueError):
        surface.clear(-3)


@pytest.mark.parametrize("r", [1, 13, 64])
def test_full_surface_area_is_four_r_squared(surface, r):
    surface.clear(r)
    surface.fill_all()
    assert estimate_circle_area(surface) == 4 * r * r


def test_fill_on_zero_size_is_noop(surface):
    surface.clear(0)
    surface.fill_quarter_arc()
    surface.fill_all()
    assert surface.opaque_pixel_count() == 0


@pytest.mark.parametrize("r", [50, 200])
def test_agrees_with_array_surface(surface, r):
    surface.clear(r)
    surface.fill_quarter_arc()

    reference = ArraySurface(r)
    reference.fill_quarter_arc()

    assert abs(surface.opaque_pixel_count() - reference.opaque_pixel_count()) <= 2 * r


def test_quarter_arc_covers_corner_not_far_corner(surface):
    n = 60
    surface.clear(n)
    surface.fill_quarter_arc()
    alpha = surface.rgba()[:, :, 3]
    assert alpha[n - 1, n - 1] == 255
    assert alpha[n // 2, n // 2] == 255
    assert alpha[0, 0] == 0


def test_estimate_with_qt_surface(surface):
    est = estimate_pi(300, surface=surface)
    assert est.area_pixels == 4 * surface.opaque_pixel_count()
    assert abs(est.pi_from_area - math.pi) < 0.1
