"""
Models package.

This package contains the data models behind shape buttons.

- Shape kinds (ShapeKind)
- Geometry helpers (hit testing, sweep ranges, extents)
- Shapes (ShapeElement, EmbossStyle)
- Shape collections and their layout / touch handling (ShapeCollection)
"""

from .shape_kind import ShapeKind, PATH_KINDS
from .shape_geometry import (
    Bounds,
    to_local_frame,
    normalized_sweep,
    is_angle_in_range,
    hit_test,
    rotated_footprint,
    needed_extent,
)
from .shape_element import (
    DEFAULT_BASE_COLOR,
    DEFAULT_ACCENT_COLOR,
    DISABLED_ALPHA,
    EmbossStyle,
    ShapeElement,
)
from .shape_collection import (
    MeasureMode,
    MeasureSpec,
    TouchPhase,
    ShapeCollection,
    UNSPECIFIED,
)


__all__ = [
    # Kinds
    "ShapeKind",
    "PATH_KINDS",
    # Geometry
    "Bounds",
    "to_local_frame",
    "normalized_sweep",
    "is_angle_in_range",
    "hit_test",
    "rotated_footprint",
    "needed_extent",
    # Shapes
    "DEFAULT_BASE_COLOR",
    "DEFAULT_ACCENT_COLOR",
    "DISABLED_ALPHA",
    "EmbossStyle",
    "ShapeElement",
    # Collections
    "MeasureMode",
    "MeasureSpec",
    "TouchPhase",
    "ShapeCollection",
    "UNSPECIFIED",
]
