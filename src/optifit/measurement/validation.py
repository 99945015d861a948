from collections.abc import Iterable

from optifit.my_dataclasses.landmarks import (
    CALIBRATION_LANDMARKS,
    MEASUREMENT_LANDMARKS,
    LandmarkPoint,
    LandmarkType,
)


def missing_landmarks(points: Iterable[LandmarkPoint],
                      required: Iterable[LandmarkType]) -> tuple[LandmarkType, ...]:
    """Required types with no point in `points`, in the order given by `required`."""
    present = {p.type for p in points}
    return tuple(t for t in required if t not in present)


def has_calibration_points(points: Iterable[LandmarkPoint]) -> bool:
    """True if both card edges are marked. Does not check that they differ."""
    return not missing_landmarks(points, CALIBRATION_LANDMARKS)


def has_measurement_points(points: Iterable[LandmarkPoint]) -> bool:
    """True if all five measurement landmarks are marked."""
    return not missing_landmarks(points, MEASUREMENT_LANDMARKS)
