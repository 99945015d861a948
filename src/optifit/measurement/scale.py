"""
Pixel distances and the card-based pixel -> millimeter scale.

The scale comes from a reference object of known physical width (an
ISO/IEC 7810 ID-1 card, 85.6 mm) whose two edges were marked on the photo:

    pixels_per_mm = |card_right - card_left| / CARD_WIDTH_MM
    mm            = pixels / pixels_per_mm
"""
import numpy as np

from optifit.my_dataclasses.landmarks import Point

CARD_WIDTH_MM = 85.6


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance in pixels. Never negative; 0 for coincident points."""
    return float(np.hypot(p2.x - p1.x, p2.y - p1.y))


def pixels_per_mm(card_left: Point, card_right: Point,
                  reference_width_mm: float = CARD_WIDTH_MM) -> float:
    """
    Pixels per millimeter from the two card edges.

    Returns exactly 0.0 when the edges coincide. That value means
    "not calibrated" and must be rejected before any mm conversion
    (see calibrate_from_landmarks).
    """
    return distance(card_left, card_right) / reference_width_mm


def pixels_to_mm(pixels: float, scale: float) -> float:
    """Convert a pixel length to mm. Caller guarantees scale > 0."""
    return pixels / scale
