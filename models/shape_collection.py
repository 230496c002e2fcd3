"""
Shape Collection.

The ordered set of shapes behind a shape button. Keeps shapes sorted by
z-order, aggregates their extents for layout, draws them back to front and
runs the press / move / release state machine that turns pointer input into
clicks.

Usage:
    collection = ShapeCollection(on_redraw=widget.update)
    collection.on_click = lambda shape_id: print(shape_id)
    collection.add_shape(ShapeElement(ShapeKind.OVAL, width=40, height=40))

    collection.on_touch(TouchPhase.DOWN, 20, 20)
    collection.on_touch(TouchPhase.UP, 20, 20)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Callable, Iterator, List, Optional, Tuple

from .shape_element import ShapeElement


logger = logging.getLogger(__name__)


# =============================================================================
# Enumerations
# =============================================================================

class MeasureMode(Enum):
    """How a layout constraint applies to one axis."""
    EXACTLY = "exactly"         # Use the constraint size
    AT_MOST = "at_most"         # Use the smaller of needed and constraint
    UNSPECIFIED = "unspecified" # Use the needed size


class TouchPhase(Enum):
    """Phase of a pointer gesture."""
    DOWN = "down"
    MOVE = "move"
    UP = "up"


@dataclass(frozen=True)
class MeasureSpec:
    """Layout constraint for one axis."""
    mode: MeasureMode = MeasureMode.UNSPECIFIED
    size: int = 0

    def resolve(self, needed: int) -> int:
        """Apply the constraint to a needed size."""
        if self.mode == MeasureMode.EXACTLY:
            return self.size
        if self.mode == MeasureMode.AT_MOST:
            return min(self.size, needed)
        return needed


UNSPECIFIED = MeasureSpec()


# =============================================================================
# Collection
# =============================================================================

class ShapeCollection:
    """
    Z-sorted shapes with measure, draw and touch handling.

    Shapes are owned by the collection. They stay sorted ascending by
    z_order; shapes with equal z_order keep their insertion order.

    Attributes:
        on_click: Called with the identifier of a clicked shape. Shapes
            without an identifier never trigger it.
        on_redraw: Called whenever visible state changes
    """

    def __init__(self,
                 on_redraw: Optional[Callable[[], None]] = None,
                 on_click: Optional[Callable[[str], None]] = None):
        self._shapes: List[ShapeElement] = []
        self._selected_index: Optional[int] = None
        self.on_redraw = on_redraw
        self.on_click = on_click

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[ShapeElement]:
        return iter(self._shapes)

    @property
    def shapes(self) -> Tuple[ShapeElement, ...]:
        """Shapes in draw order (ascending z-order)."""
        return tuple(self._shapes)

    @property
    def selected_index(self) -> Optional[int]:
        """Index of the pressed shape, or None."""
        return self._selected_index

    @property
    def selected_shape(self) -> Optional[ShapeElement]:
        if self._selected_index is None:
            return None
        return self._shapes[self._selected_index]

    def _request_redraw(self):
        if self.on_redraw is not None:
            self.on_redraw()

    # =========================================================================
    # Content
    # =========================================================================

    def add_shape(self, shape: ShapeElement):
        """Add a shape and keep the list sorted by z-order."""
        if any(existing is shape for existing in self._shapes):
            return
        selected = self.selected_shape
        self._shapes.append(shape)
        self._shapes.sort(key=attrgetter("z_order"))
        if selected is not None:
            self._selected_index = self._index_of(selected)
        self._request_redraw()

    def _index_of(self, shape: ShapeElement) -> int:
        for i, existing in enumerate(self._shapes):
            if existing is shape:
                return i
        raise ValueError("shape is not part of this collection")

    def find_shapes(self, identifier: Optional[str]) -> List[ShapeElement]:
        """All shapes carrying the given identifier."""
        if identifier is None:
            return []
        return [shape for shape in self._shapes if shape.identifier == identifier]

    def shape_at(self, x: float, y: float) -> Optional[ShapeElement]:
        """Topmost enabled shape under a point, or None."""
        for shape in reversed(self._shapes):
            if shape.hit_test(x, y):
                return shape
        return None

    def set_shape_enabled(self, identifier: Optional[str], enabled: bool):
        """
        Enable or disable every shape with the given identifier.

        Args:
            identifier: Shape identifier; None does nothing
            enabled: New enabled state
        """
        for shape in self.find_shapes(identifier):
            shape.set_enabled(enabled)
            self._request_redraw()

    # =========================================================================
    # Layout and drawing
    # =========================================================================

    def needed_size(self) -> Tuple[int, int]:
        """Largest extent needed by any shape."""
        needed_width = 0
        needed_height = 0
        for shape in self._shapes:
            width, height = shape.measure_extent()
            needed_width = max(needed_width, width)
            needed_height = max(needed_height, height)
        return needed_width, needed_height

    def measure(self,
                width_spec: MeasureSpec = UNSPECIFIED,
                height_spec: MeasureSpec = UNSPECIFIED,
                padding: Tuple[int, int] = (0, 0)) -> Tuple[int, int]:
        """
        Compute the size the shapes want under layout constraints.

        Args:
            width_spec: Horizontal constraint
            height_spec: Vertical constraint
            padding: Total (horizontal, vertical) padding around the shapes

        Returns:
            (width, height) in pixels
        """
        needed_width, needed_height = self.needed_size()
        needed_width += padding[0]
        needed_height += padding[1]
        return width_spec.resolve(needed_width), height_spec.resolve(needed_height)

    def draw(self, painter):
        """Draw every shape, lowest z-order first."""
        for shape in self._shapes:
            shape.draw(painter)

    # =========================================================================
    # Touch handling
    # =========================================================================

    def on_touch(self, phase: TouchPhase, x: float, y: float) -> bool:
        """
        Feed one pointer event through the press state machine.

        DOWN presses the topmost shape under the pointer. MOVE releases it
        without a click once the pointer leaves it. UP clicks it if the
        pointer is still on it, then releases it.

        Args:
            phase: Gesture phase
            x: Pointer X in content coordinates
            y: Pointer Y in content coordinates

        Returns:
            True while a shape is selected
        """
        if phase == TouchPhase.DOWN:
            self._press(x, y)
        elif phase == TouchPhase.MOVE:
            self._move(x, y)
        elif phase == TouchPhase.UP:
            self._release(x, y)

        return self._selected_index is not None

    def _press(self, x: float, y: float):
        # A missing release leaves the previous shape pressed
        previous = self.selected_shape
        if previous is not None:
            previous.set_pressed(False)
            self._request_redraw()

        self._selected_index = None
        for i in range(len(self._shapes) - 1, -1, -1):
            shape = self._shapes[i]
            if shape.hit_test(x, y):
                self._selected_index = i
                shape.set_pressed(True)
                self._request_redraw()
                break

    def _move(self, x: float, y: float):
        shape = self.selected_shape
        if shape is None:
            return
        if not shape.hit_test(x, y):
            shape.set_pressed(False)
            self._selected_index = None
            self._request_redraw()

    def _release(self, x: float, y: float):
        shape = self.selected_shape
        if shape is None:
            return

        if shape.hit_test(x, y):
            if shape.identifier is not None and self.on_click is not None:
                logger.debug(f"Shape clicked: {shape.identifier}")
                self.on_click(shape.identifier)

        shape.set_pressed(False)
        self._selected_index = None
        self._request_redraw()


__all__ = [
    "MeasureMode",
    "MeasureSpec",
    "TouchPhase",
    "ShapeCollection",
]
