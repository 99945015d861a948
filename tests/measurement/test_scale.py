import pytest

from optifit.measurement.scale import CARD_WIDTH_MM, distance, pixels_per_mm, pixels_to_mm
from optifit.my_dataclasses.landmarks import Point

PAIRS = [
    (Point(0, 0), Point(3, 4)),
    (Point(100, 500), Point(400, 500)),
    (Point(-12.5, 7.25), Point(33.0, -81.0)),
    (Point(1e-3, 1e-3), Point(2e-3, 0)),
]


def test_distance_known_values():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert distance(Point(100, 500), Point(400, 500)) == pytest.approx(300.0)


@pytest.mark.parametrize("a, b", PAIRS)
def test_distance_is_symmetric(a, b):
    assert distance(a, b) == distance(b, a)


@pytest.mark.parametrize("p", [Point(0, 0), Point(250.5, -3.0)])
def test_distance_to_itself_is_zero(p):
    assert distance(p, p) == 0


def test_scale_for_seed_card():
    assert pixels_per_mm(Point(100, 500), Point(400, 500)) == pytest.approx(300 / 85.6)


@pytest.mark.parametrize("a, b", PAIRS)
def test_scale_positive_for_distinct_points(a, b):
    assert pixels_per_mm(a, b) > 0


def test_scale_zero_for_coincident_points():
    p = Point(42, 42)
    assert pixels_per_mm(p, p) == 0


@pytest.mark.parametrize("a, b", PAIRS)
def test_card_width_recovered_from_own_scale(a, b):
    mm = pixels_to_mm(distance(a, b), pixels_per_mm(a, b))
    assert mm == pytest.approx(CARD_WIDTH_MM)


def test_custom_reference_width():
    scale = pixels_per_mm(Point(0, 0), Point(200, 0), reference_width_mm=100.0)
    assert scale == pytest.approx(2.0)
    assert pixels_to_mm(50, scale) == pytest.approx(25.0)
