import pytest

from optifit.measurement.measurement_engine import calculate_measurements, round_one_decimal
from optifit.measurement.validation import has_measurement_points
from optifit.measurement.calibration import calibrate_from_landmarks
from optifit.my_dataclasses.landmarks import MEASUREMENT_LANDMARKS, LandmarkPoint, LandmarkType
from optifit.my_dataclasses.measurement_results import MeasurementResults


@pytest.fixture
def calibration(card_points):
    return calibrate_from_landmarks(card_points)


def test_seed_scenario(face_points, calibration):
    results = calculate_measurements(face_points, calibration)

    assert results == MeasurementResults(
        dp=57.1,
        dpn_left=28.5,
        dpn_right=28.5,
        height_left=22.8,
        height_right=22.8,
    )


def test_missing_bridge_gives_none(face_points, calibration):
    points = [p for p in face_points if p.type != LandmarkType.BRIDGE_CENTER]
    assert calculate_measurements(points, calibration) is None


@pytest.mark.parametrize("dropped", MEASUREMENT_LANDMARKS)
def test_incomplete_matches_validator(face_points, calibration, dropped):
    points = [p for p in face_points if p.type != dropped]
    assert not has_measurement_points(points)
    assert calculate_measurements(points, calibration) is None


def test_empty_set_gives_none(calibration):
    assert calculate_measurements([], calibration) is None


def test_dpn_uses_horizontal_projection(calibration):
    # bridge far above the pupils: only the x offset counts
    points = [
        LandmarkPoint.at(LandmarkType.LEFT_PUPIL, 150, 300),
        LandmarkPoint.at(LandmarkType.RIGHT_PUPIL, 370, 300),
        LandmarkPoint.at(LandmarkType.BRIDGE_CENTER, 250, 0),
        LandmarkPoint.at(LandmarkType.LEFT_LENS_BOTTOM, 150, 380),
        LandmarkPoint.at(LandmarkType.RIGHT_LENS_BOTTOM, 370, 380),
    ]
    results = calculate_measurements(points, calibration)

    scale = calibration.pixels_per_mm
    assert results.dpn_left == round_one_decimal(100 / scale)
    assert results.dpn_right == round_one_decimal(120 / scale)


def test_heights_independent_of_direction(face_points, calibration):
    # lens edge above the pupil gives the same absolute height
    flipped = [
        LandmarkPoint.at(p.type, p.x, 220) if p.type in (
            LandmarkType.LEFT_LENS_BOTTOM, LandmarkType.RIGHT_LENS_BOTTOM) else p
        for p in face_points
    ]
    results = calculate_measurements(flipped, calibration)
    assert results.height_left == 22.8
    assert results.height_right == 22.8


def test_deterministic(face_points, calibration):
    first = calculate_measurements(face_points, calibration)
    second = calculate_measurements(list(reversed(face_points)), calibration)
    assert first == second


def test_values_scale_with_calibration(face_points):
    card = [
        LandmarkPoint.at(LandmarkType.CARD_LEFT, 0, 0),
        LandmarkPoint.at(LandmarkType.CARD_RIGHT, 856, 0),
    ]
    # 10 px per mm
    results = calculate_measurements(face_points, calibrate_from_landmarks(card))
    assert results.dp == 20.0
    assert results.dpn_left == 10.0
    assert results.height_right == 8.0


@pytest.mark.parametrize("value, expected", [
    (57.0666, 57.1),
    (28.5333, 28.5),
    (12.25, 12.3),
    (0.04, 0.0),
    (0.05, 0.1),
    (-12.25, -12.3),
    (3.0, 3.0),
])
def test_round_one_decimal(value, expected):
    assert round_one_decimal(value) == expected


def test_results_as_dict(face_points, calibration):
    results = calculate_measurements(face_points, calibration)
    assert results.as_dict() == {
        "dp": 57.1,
        "dpnLeft": 28.5,
        "dpnRight": 28.5,
        "heightLeft": 22.8,
        "heightRight": 22.8,
    }
