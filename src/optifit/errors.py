from optifit.my_dataclasses.landmarks import LandmarkType


class MeasurementError(Exception):
    """Base class for recoverable calibration/measurement failures."""


class DegenerateCalibrationError(MeasurementError, ValueError):
    """The card edge points coincide (or nearly so): no usable pixel scale."""

    def __init__(self, pixels_per_mm: float, pixel_distance: float | None = None):
        self.pixels_per_mm = pixels_per_mm
        self.pixel_distance = pixel_distance
        if pixel_distance is None:
            msg = f"Invalid calibration scale: {pixels_per_mm} px/mm"
        else:
            msg = (f"Card edges are {pixel_distance:.2f} px apart "
                   f"({pixels_per_mm} px/mm); mark both edges again")
        super().__init__(msg)


class IncompleteLandmarksError(MeasurementError):
    """Required landmarks have not been marked yet."""

    def __init__(self, missing: tuple[LandmarkType, ...]):
        self.missing = tuple(missing)
        names = ", ".join(t.value for t in self.missing)
        super().__init__(f"Missing landmarks: {names}")


class NotCalibratedError(MeasurementError):
    pass
