import time
import uuid
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Point:
    """A position in the coordinate space of the displayed photo (pixels)."""
    x: float
    y: float


class LandmarkType(Enum):
    CARD_LEFT = "card_left"
    CARD_RIGHT = "card_right"
    LEFT_PUPIL = "left_pupil"
    RIGHT_PUPIL = "right_pupil"
    BRIDGE_CENTER = "bridge_center"
    LEFT_LENS_BOTTOM = "left_lens_bottom"
    RIGHT_LENS_BOTTOM = "right_lens_bottom"


# Marking order used when walking the user through each stage
CALIBRATION_LANDMARKS: tuple[LandmarkType, ...] = (
    LandmarkType.CARD_LEFT,
    LandmarkType.CARD_RIGHT,
)

MEASUREMENT_LANDMARKS: tuple[LandmarkType, ...] = (
    LandmarkType.LEFT_PUPIL,
    LandmarkType.RIGHT_PUPIL,
    LandmarkType.BRIDGE_CENTER,
    LandmarkType.LEFT_LENS_BOTTOM,
    LandmarkType.RIGHT_LENS_BOTTOM,
)


@dataclass(frozen=True)
class LandmarkStep:
    landmark_type: LandmarkType
    title: str
    instruction: str


LANDMARK_STEPS: dict[LandmarkType, LandmarkStep] = {
    LandmarkType.CARD_LEFT: LandmarkStep(
        LandmarkType.CARD_LEFT, "Card left edge",
        "Tap the leftmost point of the card border"),
    LandmarkType.CARD_RIGHT: LandmarkStep(
        LandmarkType.CARD_RIGHT, "Card right edge",
        "Tap the rightmost point of the card border"),
    LandmarkType.LEFT_PUPIL: LandmarkStep(
        LandmarkType.LEFT_PUPIL, "Left pupil",
        "Tap the center of the left pupil"),
    LandmarkType.RIGHT_PUPIL: LandmarkStep(
        LandmarkType.RIGHT_PUPIL, "Right pupil",
        "Tap the center of the right pupil"),
    LandmarkType.BRIDGE_CENTER: LandmarkStep(
        LandmarkType.BRIDGE_CENTER, "Nasal bridge",
        "Tap the center of the nasal bridge (middle of the frame)"),
    LandmarkType.LEFT_LENS_BOTTOM: LandmarkStep(
        LandmarkType.LEFT_LENS_BOTTOM, "Left lens bottom",
        "Tap the bottom line of the left lens"),
    LandmarkType.RIGHT_LENS_BOTTOM: LandmarkStep(
        LandmarkType.RIGHT_LENS_BOTTOM, "Right lens bottom",
        "Tap the bottom line of the right lens"),
}


def make_landmark_id(landmark_type: LandmarkType) -> str:
    return f"{landmark_type.value}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


@dataclass(frozen=True)
class LandmarkPoint:
    """
    A marked position with its semantic role.

    At most one LandmarkPoint of a given type is active in a working set;
    see LandmarkSet for the replace-on-add rule.
    """
    type: LandmarkType
    point: Point
    id: str = field(default="")
    label: str = field(default="")

    def __post_init__(self):
        # frozen dataclass: fill defaults through object.__setattr__
        if not self.id:
            object.__setattr__(self, "id", make_landmark_id(self.type))
        if not self.label:
            object.__setattr__(self, "label", LANDMARK_STEPS[self.type].title)

    @classmethod
    def at(cls, landmark_type: LandmarkType, x: float, y: float) -> "LandmarkPoint":
        return cls(type=landmark_type, point=Point(float(x), float(y)))

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def moved(self, dx: float, dy: float) -> "LandmarkPoint":
        """Same landmark (id and label kept), shifted by (dx, dy) pixels."""
        return LandmarkPoint(
            type=self.type,
            point=Point(self.x + dx, self.y + dy),
            id=self.id,
            label=self.label,
        )


def find_landmark(points, landmark_type: LandmarkType) -> LandmarkPoint | None:
    """Return the first point of the given type, or None."""
    for p in points:
        if p.type == landmark_type:
            return p
    return None
