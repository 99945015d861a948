from dataclasses import dataclass

from optifit.errors import DegenerateCalibrationError
from optifit.my_dataclasses.landmarks import LandmarkPoint


@dataclass(frozen=True)
class CalibrationData:
    """
    Pixel scale derived from the two marked card edges.

    Only valid instances exist: pixels_per_mm <= 0 raises
    DegenerateCalibrationError. Built from marked landmarks by
    optifit.measurement.calibration.calibrate_from_landmarks().
    """
    card_left: LandmarkPoint
    card_right: LandmarkPoint
    pixels_per_mm: float

    def __post_init__(self):
        if not self.pixels_per_mm > 0:
            raise DegenerateCalibrationError(self.pixels_per_mm)
