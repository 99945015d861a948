"""
Optical measurements for lens fitting from five marked landmarks.

Geometry (image coordinates, y grows downwards):

    DP          straight line, left pupil -> right pupil
    DPN l/r     horizontal distance from the nasal reference line
                x = bridge_center.x to each pupil
    height l/r  vertical distance from each pupil to the bottom edge of
                the lens on the same side

DPN uses the horizontal projection onto the bridge's vertical line, not the
Euclidean distance to the bridge point. Keep it that way: the clinical values
depend on it.

All values are converted with the calibration scale and rounded to 0.1 mm.
"""
import math
from collections.abc import Iterable

from optifit.logging_utils.logging_setup import get_logger
from optifit.measurement.calibration import calibrate_from_landmarks
from optifit.measurement.scale import distance, pixels_to_mm
from optifit.my_dataclasses.calibration_data import CalibrationData
from optifit.my_dataclasses.landmarks import LandmarkPoint, LandmarkType, find_landmark
from optifit.my_dataclasses.measurement_results import MeasurementResults

log = get_logger(__name__)


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal (12.25 -> 12.3, -12.25 -> -12.3)."""
    scaled = abs(value) * 10
    return math.copysign(math.floor(scaled + 0.5) / 10, value)


def calculate_measurements(points: Iterable[LandmarkPoint],
                           calibration: CalibrationData) -> MeasurementResults | None:
    """
    Compute DP, DPN and optical heights.

    Returns None if any of the five measurement landmarks is missing;
    no partial result is ever produced.
    """
    points = list(points)
    left_pupil = find_landmark(points, LandmarkType.LEFT_PUPIL)
    right_pupil = find_landmark(points, LandmarkType.RIGHT_PUPIL)
    bridge_center = find_landmark(points, LandmarkType.BRIDGE_CENTER)
    left_lens_bottom = find_landmark(points, LandmarkType.LEFT_LENS_BOTTOM)
    right_lens_bottom = find_landmark(points, LandmarkType.RIGHT_LENS_BOTTOM)

    if (left_pupil is None or right_pupil is None or bridge_center is None
            or left_lens_bottom is None or right_lens_bottom is None):
        log.debug("Incomplete landmark set (%d points), no measurement", len(points))
        return None

    scale = calibration.pixels_per_mm

    dp = pixels_to_mm(distance(left_pupil.point, right_pupil.point), scale)

    # nasal reference line: x = bridge_x
    bridge_x = bridge_center.x
    dpn_left = pixels_to_mm(abs(left_pupil.x - bridge_x), scale)
    dpn_right = pixels_to_mm(abs(right_pupil.x - bridge_x), scale)

    height_left = pixels_to_mm(abs(left_pupil.y - left_lens_bottom.y), scale)
    height_right = pixels_to_mm(abs(right_pupil.y - right_lens_bottom.y), scale)

    results = MeasurementResults(
        dp=round_one_decimal(dp),
        dpn_left=round_one_decimal(dpn_left),
        dpn_right=round_one_decimal(dpn_right),
        height_left=round_one_decimal(height_left),
        height_right=round_one_decimal(height_right),
    )
    log.debug("Measurements at %.4f px/mm: %s", scale, results)
    return results


if __name__ == "__main__":
    card = [
        LandmarkPoint.at(LandmarkType.CARD_LEFT, 100, 500),
        LandmarkPoint.at(LandmarkType.CARD_RIGHT, 400, 500),
    ]
    face = [
        LandmarkPoint.at(LandmarkType.LEFT_PUPIL, 150, 300),
        LandmarkPoint.at(LandmarkType.RIGHT_PUPIL, 350, 300),
        LandmarkPoint.at(LandmarkType.BRIDGE_CENTER, 250, 290),
        LandmarkPoint.at(LandmarkType.LEFT_LENS_BOTTOM, 150, 380),
        LandmarkPoint.at(LandmarkType.RIGHT_LENS_BOTTOM, 350, 380),
    ]
    cal = calibrate_from_landmarks(card)
    print(f"{cal.pixels_per_mm:.4f} px/mm")
    print(calculate_measurements(face, cal))
