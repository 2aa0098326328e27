import math

import pytest

from pixelpi.config import MAX_RADIUS
from pixelpi.model.estimation import InvalidRadiusError, PiEstimate, estimate_pi, validate_radius
from pixelpi.model.rasterization import count_perimeter_pixels
from pixelpi.model.surface import ArraySurface


@pytest.mark.parametrize("value, expected", [(1, 1), (10, 10), (10.9, 10), ("25", 25), (" 7.5 ", 7), (MAX_RADIUS, MAX_RADIUS)])
def test_validate_radius_accepts_and_truncates(value, expected):
    assert validate_radius(value) == expected


@pytest.mark.parametrize(
    "value",
    [0, 0.5, -1, -10.0, float("nan"), float("inf"), float("-inf"), MAX_RADIUS + 1, "abc", "", None, [10], True],
)
def test_validate_radius_rejects(value):
    with pytest.raises(InvalidRadiusError):
        validate_radius(value)


def test_invalid_radius_error_is_value_error():
    assert issubclass(InvalidRadiusError, ValueError)


def test_estimate_rejects_zero_radius_instead_of_dividing():
    with pytest.raises(InvalidRadiusError):
        estimate_pi(0)


def test_radius_ten_theoretical_values():
    est = estimate_pi(10)
    assert est.radius == 10
    assert est.theoretical_perimeter == pytest.approx(62.83, abs=0.01)
    assert est.theoretical_area == pytest.approx(314.16, abs=0.01)
    assert est.theoretical_pi == pytest.approx(math.pi)


def test_estimate_uses_perimeter_counter():
    est = estimate_pi(77)
    assert est.perimeter_pixels == count_perimeter_pixels(77)
    assert est.pi_from_perimeter == pytest.approx(est.perimeter_pixels / (2 * 77))
    assert est.pi_from_area == pytest.approx(est.area_pixels / 77 ** 2)


@pytest.mark.parametrize("r", [50, 100, 250, 500])
def test_estimates_are_close_to_pi(r):
    est = estimate_pi(r)
    assert abs(est.pi_from_perimeter - math.pi) < 0.5
    assert abs(est.pi_from_area - math.pi) < 0.5


def test_area_estimate_tightens_with_radius():
    assert abs(estimate_pi(50).pi_from_area - math.pi) < 0.1
    assert abs(estimate_pi(500).pi_from_area - math.pi) < 0.01


def test_perimeter_estimate_converges_to_two_root_two():
    # pixel staircases are counted, not their Euclidean length
    est = estimate_pi(500)
    assert est.pi_from_perimeter == pytest.approx(2 * math.sqrt(2), abs=0.05)


def test_estimate_is_idempotent():
    assert estimate_pi(123) == estimate_pi(123)


def test_estimate_reuses_given_surface():
    surface = ArraySurface(3)
    surface.fill_all()
    est = estimate_pi(60, surface=surface)
    assert surface.size == 60
    assert est.area_pixels == 4 * surface.opaque_pixel_count()


def test_rows_follow_display_order():
    est = estimate_pi(10)
    labels = [label for label, _ in est.as_rows()]
    assert labels == [
        "Theoretical perimeter",
        "Theoretical pi",
        "Theoretical area",
        "Perimeter pixels",
        "Pi from perimeter",
        "Practical area",
        "Pi from area",
    ]
    assert isinstance(est, PiEstimate)
    assert est.to_dict()["area_pixels"] == est.area_pixels
