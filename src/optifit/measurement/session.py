from optifit.config.measurement_config import measurement_config
from optifit.errors import IncompleteLandmarksError, NotCalibratedError
from optifit.logging_utils.logging_setup import get_logger
from optifit.measurement.calibration import calibrate_from_landmarks
from optifit.measurement.landmark_set import LandmarkSet
from optifit.measurement.measurement_engine import calculate_measurements
from optifit.measurement.validation import has_calibration_points, has_measurement_points
from optifit.my_dataclasses.calibration_data import CalibrationData
from optifit.my_dataclasses.landmarks import LandmarkType
from optifit.my_dataclasses.measurement_results import MeasurementResults

log = get_logger(__name__)


class MeasurementSession:
    """
    Landmarks, calibration and results for one photo.

    The caller drives the workflow (which screen, which landmark next);
    the session only guards each computation and raises a MeasurementError
    subclass when a step cannot be completed.
    """

    def __init__(self, reference_width_mm: float | None = None,
                 min_pixel_distance: float | None = None):
        cfg = measurement_config.get()
        self.reference_width_mm = (cfg.reference_width_mm if reference_width_mm is None
                                   else float(reference_width_mm))
        self.min_pixel_distance = (cfg.min_pixel_distance if min_pixel_distance is None
                                   else float(min_pixel_distance))

        self.calibration_points = LandmarkSet.for_calibration()
        self.measurement_points = LandmarkSet.for_measurement()
        self.calibration: CalibrationData | None = None
        self.results: MeasurementResults | None = None

    @property
    def is_calibrated(self) -> bool:
        """True while the stored calibration matches the card edges currently marked."""
        cal = self.calibration
        return (cal is not None
                and self.calibration_points.get(LandmarkType.CARD_LEFT) == cal.card_left
                and self.calibration_points.get(LandmarkType.CARD_RIGHT) == cal.card_right)

    def calibrate(self) -> CalibrationData:
        # a failed attempt must not leave the previous scale usable
        self.calibration = None
        self.results = None

        if not has_calibration_points(self.calibration_points):
            raise IncompleteLandmarksError(self.calibration_points.missing())

        self.calibration = calibrate_from_landmarks(
            self.calibration_points,
            reference_width_mm=self.reference_width_mm,
            min_pixel_distance=self.min_pixel_distance,
        )
        log.info("Calibration set: %.4f px/mm", self.calibration.pixels_per_mm)
        return self.calibration

    def measure(self) -> MeasurementResults:
        if not self.is_calibrated:
            log.warning("Measurement requested without a calibration for the marked card edges")
            raise NotCalibratedError("Calibrate with the card before measuring")

        if not has_measurement_points(self.measurement_points):
            missing = self.measurement_points.missing()
            log.warning("Measurement rejected, missing %s", [t.value for t in missing])
            raise IncompleteLandmarksError(missing)

        results = calculate_measurements(self.measurement_points, self.calibration)
        if results is None:
            raise IncompleteLandmarksError(self.measurement_points.missing())
        self.results = results
        log.info("Measured: %s", results.as_dict())
        return results

    def restart_calibration(self) -> None:
        """Drop the card points and everything derived from them."""
        self.calibration_points.reset()
        self.measurement_points.reset()
        self.calibration = None
        self.results = None

    def restart_measurement(self) -> None:
        self.measurement_points.reset()
        self.results = None
