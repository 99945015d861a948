from collections.abc import Iterable

from optifit.errors import DegenerateCalibrationError, IncompleteLandmarksError
from optifit.logging_utils.logging_setup import get_logger
from optifit.measurement.scale import CARD_WIDTH_MM, distance, pixels_per_mm
from optifit.measurement.validation import missing_landmarks
from optifit.my_dataclasses.calibration_data import CalibrationData
from optifit.my_dataclasses.landmarks import (
    CALIBRATION_LANDMARKS,
    LandmarkPoint,
    LandmarkType,
    find_landmark,
)

log = get_logger(__name__)


def calibrate_from_landmarks(points: Iterable[LandmarkPoint],
                             reference_width_mm: float = CARD_WIDTH_MM,
                             min_pixel_distance: float = 0.0) -> CalibrationData:
    """
    Args:
        points: marked landmarks, must contain both card edges
        reference_width_mm: physical width of the reference object
        min_pixel_distance: edge separations at or below this are rejected

    Raises:
        IncompleteLandmarksError: a card edge is not marked
        DegenerateCalibrationError: the edges are too close for a usable scale
    """
    points = list(points)
    missing = missing_landmarks(points, CALIBRATION_LANDMARKS)
    if missing:
        log.warning("Calibration rejected, missing %s", [t.value for t in missing])
        raise IncompleteLandmarksError(missing)

    card_left = find_landmark(points, LandmarkType.CARD_LEFT)
    card_right = find_landmark(points, LandmarkType.CARD_RIGHT)

    px_distance = distance(card_left.point, card_right.point)
    scale = pixels_per_mm(card_left.point, card_right.point, reference_width_mm)
    if px_distance <= min_pixel_distance or not scale > 0:
        log.warning("Degenerate calibration: edges %.2f px apart (min %.2f)",
                    px_distance, min_pixel_distance)
        raise DegenerateCalibrationError(scale, px_distance)

    log.debug("Calibrated: %.2f px over %.1f mm -> %.4f px/mm",
              px_distance, reference_width_mm, scale)
    return CalibrationData(card_left=card_left, card_right=card_right, pixels_per_mm=scale)
