"""
Shape Geometry.

Pure geometry used by shape buttons: point transforms into a shape's local
frame, per-kind hit testing, sweep range handling for arcs and the extent a
rotated shape needs inside its container.

Conventions:
- Bounds are (x, y, width, height) with (x, y) the top-left corner.
- Angles are in degrees, 0° along +x, positive angles turning toward +y
  (clockwise on screen). The same convention is used for rotation and for
  arc sweep ranges.

Path construction lives in services.shape_paths since it needs QPainterPath.
"""

import math
from typing import Callable, Dict, Optional, Tuple

from .shape_kind import ShapeKind


Bounds = Tuple[float, float, float, float]


# =============================================================================
# Frames and angles
# =============================================================================

def to_local_frame(bounds: Bounds, rotation: float,
                   px: float, py: float) -> Tuple[float, float]:
    """
    Express a point relative to the shape center with its rotation undone.

    Args:
        bounds: Shape bounds (x, y, width, height)
        rotation: Shape rotation in degrees about its center
        px: Point X in container coordinates
        py: Point Y in container coordinates

    Returns:
        (x1, y1) offset from the center in the unrotated shape frame
    """
    x, y, width, height = bounds
    dx = px - (x + width / 2.0)
    dy = py - (y + height / 2.0)

    rad = math.radians(rotation)
    cos = math.cos(rad)
    sin = math.sin(rad)

    return cos * dx + sin * dy, -sin * dx + cos * dy


def normalized_sweep(start: float, end: float) -> float:
    """
    Angular extent covered when sweeping from start toward end.

    The sweep always turns in the positive direction. An end angle below the
    start wraps past 360°, so (350, 10) covers 20°. Sweeps are capped at a
    full turn.
    """
    sweep = end - start
    if sweep < 0:
        return sweep % 360.0
    return min(sweep, 360.0)


def is_angle_in_range(angle: float, start: float, end: float) -> bool:
    """
    Check whether an angle lies in the half-open sweep [start, start + sweep).

    The angle is shifted by whole turns onto [start, start + 360) before
    comparing, so neither the angle nor the range need to be normalized.
    """
    sweep = normalized_sweep(start, end)
    value = start + (angle - start) % 360.0
    return value < start + sweep


# =============================================================================
# Hit testing
# =============================================================================

def _ellipse_norm(x1: float, y1: float, rx: float, ry: float) -> Optional[float]:
    """Return (x/rx)² + (y/ry)², or None for a degenerate ellipse."""
    if rx <= 0 or ry <= 0:
        return None
    x2 = x1 / rx
    y2 = y1 / ry
    return x2 * x2 + y2 * y2


def _hit_box(x1, y1, width, height, thickness, start, end) -> bool:
    return abs(x1) <= width / 2.0 and abs(y1) <= height / 2.0


def _hit_oval(x1, y1, width, height, thickness, start, end) -> bool:
    norm = _ellipse_norm(x1, y1, width / 2.0, height / 2.0)
    return norm is not None and norm < 1


def _hit_arc(x1, y1, width, height, thickness, start, end) -> bool:
    if not _hit_oval(x1, y1, width, height, thickness, start, end):
        return False

    if thickness > 0:
        inner = _ellipse_norm(x1, y1,
                              width / 2.0 - thickness,
                              height / 2.0 - thickness)
        # A collapsed inner ellipse cuts nothing out
        if inner is not None and inner <= 1:
            return False

    angle = math.degrees(math.atan2(y1, x1))
    return is_angle_in_range(angle, start, end)


# Triangles are tested against their bounding box, not the true outline.
HIT_TESTS: Dict[ShapeKind, Callable[..., bool]] = {
    ShapeKind.RECTANGLE: _hit_box,
    ShapeKind.TRIANGLE: _hit_box,
    ShapeKind.OVAL: _hit_oval,
    ShapeKind.ARC: _hit_arc,
}


def hit_test(kind: ShapeKind,
             bounds: Bounds,
             thickness: float,
             arc_start: float,
             arc_end: float,
             rotation: float,
             px: float,
             py: float,
             enabled: bool = True) -> bool:
    """
    Check whether a point falls inside a shape.

    Args:
        kind: Shape kind
        bounds: Shape bounds (x, y, width, height) in container coordinates
        thickness: Ring thickness for arcs (0 = filled wedge)
        arc_start: Arc sweep start in degrees
        arc_end: Arc sweep end in degrees
        rotation: Shape rotation in degrees about its center
        px: Point X in container coordinates
        py: Point Y in container coordinates
        enabled: Disabled shapes never report a hit

    Returns:
        True if the point is inside the shape
    """
    if not enabled:
        return False

    x1, y1 = to_local_frame(bounds, rotation, px, py)
    _, _, width, height = bounds
    return HIT_TESTS[kind](x1, y1, width, height, thickness, arc_start, arc_end)


# =============================================================================
# Extents
# =============================================================================

def rotated_footprint(width: float, height: float,
                      rotation: float) -> Tuple[float, float]:
    """Axis-aligned size of a width x height box rotated about its center."""
    rad = math.radians(rotation)
    cos = abs(math.cos(rad))
    sin = abs(math.sin(rad))
    return cos * width + sin * height, sin * width + cos * height


def needed_extent(x: float, y: float, width: float, height: float,
                  rotation: float) -> Tuple[int, int]:
    """
    Container size needed to show a shape at its current rotation.

    The extent reaches from the container origin to the shape center plus
    half of the rotated footprint, rounded to whole pixels.
    """
    real_width, real_height = rotated_footprint(width, height, rotation)
    needed_width = int(x + width / 2.0 + real_width / 2.0 + 0.5)
    needed_height = int(y + height / 2.0 + real_height / 2.0 + 0.5)
    return needed_width, needed_height


__all__ = [
    "Bounds",
    "to_local_frame",
    "normalized_sweep",
    "is_angle_in_range",
    "HIT_TESTS",
    "hit_test",
    "rotated_footprint",
    "needed_extent",
]
