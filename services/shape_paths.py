"""
Shape Paths.

Builds the QPainterPath outlines for shape kinds that are not drawn from a
raw primitive (triangles and arcs). Paths are expressed in the shape's own
frame: the bounding box runs from (0, 0) to (width, height).

Arc angles follow the canvas convention used everywhere else in the
project (positive toward +y). Qt measures arc angles the other way, so they
are negated before reaching QPainterPath.
"""

import math
from typing import Callable, Dict, Optional

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QPainterPath

from models.shape_geometry import normalized_sweep
from models.shape_kind import ShapeKind


def _ellipse_point(rect: QRectF, angle: float) -> QPointF:
    """Point on the ellipse inscribed in rect at the given canvas angle."""
    rad = math.radians(angle)
    center = rect.center()
    return QPointF(
        center.x() + math.cos(rad) * rect.width() / 2.0,
        center.y() + math.sin(rad) * rect.height() / 2.0,
    )


def build_triangle_path(width: float, height: float) -> QPainterPath:
    """Isosceles triangle with its apex at the top center of the box."""
    path = QPainterPath()
    path.setFillRule(Qt.FillRule.WindingFill)
    path.moveTo(width / 2.0, 0.0)
    path.lineTo(width, height)
    path.lineTo(0.0, height)
    path.closeSubpath()
    return path


def build_arc_path(width: float, height: float,
                   start: float, end: float,
                   thickness: float) -> QPainterPath:
    """
    Build a pie wedge or ring segment.

    With thickness 0 the outer arc is closed through the box center. With a
    positive thickness the outer arc is joined to an inner arc on the box
    inset by thickness, traced back from the end angle to the start angle.

    Args:
        width: Box width
        height: Box height
        start: Sweep start in degrees
        end: Sweep end in degrees (wraps past 360° when below start)
        thickness: Ring thickness in pixels, 0 for a filled wedge

    Returns:
        Closed QPainterPath in the shape frame
    """
    outer = QRectF(0.0, 0.0, width, height)
    sweep = normalized_sweep(start, end)
    stop = start + sweep

    path = QPainterPath()
    path.setFillRule(Qt.FillRule.WindingFill)
    path.moveTo(_ellipse_point(outer, start))
    path.arcTo(outer, -start, -sweep)

    if thickness > 0:
        inner = outer.adjusted(thickness, thickness, -thickness, -thickness)
        path.lineTo(_ellipse_point(inner, stop))
        path.arcTo(inner, -stop, sweep)
        path.lineTo(_ellipse_point(outer, start))
    else:
        path.lineTo(outer.center())

    path.closeSubpath()
    return path


PATH_BUILDERS: Dict[ShapeKind, Callable[..., QPainterPath]] = {
    ShapeKind.TRIANGLE: lambda w, h, start, end, thickness: build_triangle_path(w, h),
    ShapeKind.ARC: build_arc_path,
}


def build_shape_path(kind: ShapeKind, width: float, height: float,
                     start: float = 0, end: float = 0,
                     thickness: float = 0) -> Optional[QPainterPath]:
    """
    Build the outline for a shape kind.

    Returns:
        QPainterPath, or None for kinds drawn as a raw rectangle or ellipse
    """
    builder = PATH_BUILDERS.get(kind)
    if builder is None:
        return None
    return builder(width, height, start, end, thickness)
