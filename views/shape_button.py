"""
Shape Button widget.

A single widget made of several independently clickable shapes. Shapes come
from a shape file (see services.shape_config) or are added in code, and the
widget reports which shape was clicked through the shapeClicked signal.

Usage:
    button = ShapeButton("samples/dpad.xml")
    button.shapeClicked.connect(lambda shape_id: print(shape_id))
    button.set_shape_enabled("up", False)
"""

from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from models.shape_collection import (
    MeasureSpec, ShapeCollection, TouchPhase, UNSPECIFIED,
)
from models.shape_element import ShapeElement
from services.settings_manager import get_settings
from services.shape_config import load_shapes


class ShapeButton(QWidget):
    """
    Widget drawing a collection of clickable shapes.

    Content is laid out inside the contents margins, which act as padding:
    shapes are drawn and hit-tested relative to the top-left margin.

    Signals:
        shapeClicked(str): Emitted with the identifier of a clicked shape.
            Shapes without an identifier do not emit it.
    """

    shapeClicked = pyqtSignal(str)

    def __init__(self, shapes_file: Union[str, Path, None] = None, parent=None,
                 density: Optional[float] = None):
        super().__init__(parent)

        settings = get_settings()
        # An explicit density overrides the stored one for this widget only
        self._density = density if density is not None else settings.density
        self._defaults = settings.shape_defaults
        self._antialiasing = settings.settings.ui.antialiasing
        self._listener: Optional[Callable[[str], None]] = None

        self._collection = ShapeCollection(
            on_redraw=self.update,
            on_click=self._on_shape_clicked,
        )

        padding = settings.settings.ui.padding
        self.setContentsMargins(padding, padding, padding, padding)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        if shapes_file:
            self.set_shapes_file(shapes_file)

    @property
    def collection(self) -> ShapeCollection:
        """The shapes shown by this widget."""
        return self._collection

    @property
    def density(self) -> float:
        """Pixels per dp used when reading shape files."""
        return self._density

    # =========================================================================
    # Public API
    # =========================================================================

    def add_shape(self, shape: ShapeElement):
        """Add a shape to the button."""
        self._collection.add_shape(shape)
        self.updateGeometry()

    def set_shapes_file(self, path: Union[str, Path, None]):
        """
        Add the shapes described in a shape file.

        Args:
            path: XML or JSON shape file; None adds nothing

        Raises:
            ShapeConfigError: If the file cannot be read. No shape from the
                file is added in that case.
        """
        for shape in load_shapes(path, self._density, self._defaults):
            self._collection.add_shape(shape)
        self.updateGeometry()

    def set_shape_enabled(self, identifier: Optional[str], enabled: bool):
        """Enable or disable every shape with the given identifier."""
        self._collection.set_shape_enabled(identifier, enabled)

    def set_on_click_listener(self, listener: Optional[Callable[[str], None]]):
        """Register a plain callback invoked with the clicked shape identifier."""
        self._listener = listener

    def _on_shape_clicked(self, identifier: str):
        self.shapeClicked.emit(identifier)
        if self._listener is not None:
            self._listener(identifier)

    # =========================================================================
    # Layout
    # =========================================================================

    def _padding(self) -> Tuple[int, int]:
        margins = self.contentsMargins()
        return (margins.left() + margins.right(), margins.top() + margins.bottom())

    def measure(self,
                width_spec: MeasureSpec = UNSPECIFIED,
                height_spec: MeasureSpec = UNSPECIFIED) -> QSize:
        """Size wanted by the shapes plus padding under layout constraints."""
        width, height = self._collection.measure(width_spec, height_spec, self._padding())
        return QSize(width, height)

    def sizeHint(self) -> QSize:
        return self.measure()

    def minimumSizeHint(self) -> QSize:
        return self.measure()

    # =========================================================================
    # Events
    # =========================================================================

    def paintEvent(self, event):
        """Paint the shapes inside the contents margins."""
        painter = QPainter(self)
        if self._antialiasing:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        margins = self.contentsMargins()
        painter.translate(margins.left(), margins.top())
        self._collection.draw(painter)
        painter.end()

    def _dispatch(self, phase: TouchPhase, event: QMouseEvent):
        margins = self.contentsMargins()
        pos = event.position()
        was_selected = self._collection.selected_index is not None

        handled = self._collection.on_touch(
            phase, pos.x() - margins.left(), pos.y() - margins.top()
        )

        if handled or was_selected:
            event.accept()
        else:
            event.ignore()

    def mousePressEvent(self, event: QMouseEvent):
        """Press the topmost shape under the pointer."""
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        self._dispatch(TouchPhase.DOWN, event)

    def mouseMoveEvent(self, event: QMouseEvent):
        """Cancel the press when the pointer leaves the pressed shape."""
        if not event.buttons() & Qt.MouseButton.LeftButton:
            event.ignore()
            return
        self._dispatch(TouchPhase.MOVE, event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Click the pressed shape if the pointer is still on it."""
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        self._dispatch(TouchPhase.UP, event)
