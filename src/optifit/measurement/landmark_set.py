from collections.abc import Iterator

from optifit.logging_utils.logging_setup import get_logger
from optifit.my_dataclasses.landmarks import (
    CALIBRATION_LANDMARKS,
    LANDMARK_STEPS,
    MEASUREMENT_LANDMARKS,
    LandmarkPoint,
    LandmarkStep,
    LandmarkType,
)

log = get_logger(__name__)


class LandmarkSet:
    """
    Working set of marked landmarks for one stage (calibration or measurement).

    Holds at most one point per LandmarkType: marking a type again replaces
    the previous point. Iteration yields points in the order they were
    (last) marked, which is what the validators and engines consume.
    """

    def __init__(self, required: tuple[LandmarkType, ...]):
        if not required:
            raise ValueError("A landmark set needs at least one landmark type")
        self.required = tuple(required)
        self._points: dict[LandmarkType, LandmarkPoint] = {}

    @classmethod
    def for_calibration(cls) -> "LandmarkSet":
        return cls(CALIBRATION_LANDMARKS)

    @classmethod
    def for_measurement(cls) -> "LandmarkSet":
        return cls(MEASUREMENT_LANDMARKS)

    # -------------------------------------------------------------
    # Marking
    # -------------------------------------------------------------
    def add(self, point: LandmarkPoint) -> LandmarkPoint:
        if point.type not in self.required:
            raise ValueError(f"{point.type.value} does not belong to this stage "
                             f"({', '.join(t.value for t in self.required)})")
        replaced = self._points.pop(point.type, None)
        if replaced is not None:
            log.debug("Replacing %s at (%.1f, %.1f)", point.type.value, replaced.x, replaced.y)
        self._points[point.type] = point
        return point

    def mark(self, landmark_type: LandmarkType, x: float, y: float) -> LandmarkPoint:
        return self.add(LandmarkPoint.at(landmark_type, x, y))

    def nudge(self, landmark_type: LandmarkType, dx: float, dy: float) -> LandmarkPoint:
        """Shift an already marked landmark by (dx, dy) pixels, keeping its position in order."""
        current = self._points.get(landmark_type)
        if current is None:
            raise KeyError(f"{landmark_type.value} is not marked")
        moved = current.moved(dx, dy)
        self._points[landmark_type] = moved
        return moved

    def remove(self, landmark_type: LandmarkType) -> LandmarkPoint | None:
        return self._points.pop(landmark_type, None)

    def reset(self) -> None:
        self._points.clear()

    # -------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------
    def get(self, landmark_type: LandmarkType) -> LandmarkPoint | None:
        return self._points.get(landmark_type)

    def points(self) -> list[LandmarkPoint]:
        return list(self._points.values())

    def missing(self) -> tuple[LandmarkType, ...]:
        return tuple(t for t in self.required if t not in self._points)

    def is_complete(self) -> bool:
        return not self.missing()

    def next_step(self) -> LandmarkStep | None:
        """The first landmark still to be marked, in marking order."""
        missing = self.missing()
        return LANDMARK_STEPS[missing[0]] if missing else None

    def progress(self) -> tuple[int, int]:
        return len(self._points), len(self.required)

    def __iter__(self) -> Iterator[LandmarkPoint]:
        return iter(self.points())

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, landmark_type: object) -> bool:
        return landmark_type in self._points

    def __repr__(self) -> str:
        marked, required = self.progress()
        return f"LandmarkSet({marked}/{required}: {[t.value for t in self._points]})"
