import pytest

from optifit.my_dataclasses.landmarks import LandmarkPoint, LandmarkType


@pytest.fixture
def card_points():
    return [
        LandmarkPoint.at(LandmarkType.CARD_LEFT, 100, 500),
        LandmarkPoint.at(LandmarkType.CARD_RIGHT, 400, 500),
    ]


@pytest.fixture
def face_points():
    return [
        LandmarkPoint.at(LandmarkType.LEFT_PUPIL, 150, 300),
        LandmarkPoint.at(LandmarkType.RIGHT_PUPIL, 350, 300),
        LandmarkPoint.at(LandmarkType.BRIDGE_CENTER, 250, 290),
        LandmarkPoint.at(LandmarkType.LEFT_LENS_BOTTOM, 150, 380),
        LandmarkPoint.at(LandmarkType.RIGHT_LENS_BOTTOM, 350, 380),
    ]
