"""
Shape Renderer.

Renders ShapeElement objects to a QPainter for use in:
- The ShapeButton widget
- Offscreen previews of shape files

Each shape is drawn in its own frame: the painter is moved to the shape's
top-left corner and rotated about the shape center before the body is
filled, so bodies are always drawn in the box (0, 0, width, height).
"""

from typing import Callable, Dict, Optional

from PyQt6.QtCore import Qt, QPointF, QRectF, QSize
from PyQt6.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPixmap

from models.shape_element import EmbossStyle, ShapeElement
from models.shape_kind import ShapeKind


def _draw_rect(painter: QPainter, shape: ShapeElement, rect: QRectF):
    painter.drawRect(rect)


def _draw_oval(painter: QPainter, shape: ShapeElement, rect: QRectF):
    painter.drawEllipse(rect)


def _draw_path(painter: QPainter, shape: ShapeElement, rect: QRectF):
    painter.drawPath(shape.path)


BODY_PAINTERS: Dict[ShapeKind, Callable[[QPainter, ShapeElement, QRectF], None]] = {
    ShapeKind.RECTANGLE: _draw_rect,
    ShapeKind.OVAL: _draw_oval,
    ShapeKind.TRIANGLE: _draw_path,
    ShapeKind.ARC: _draw_path,
}


class ShapeRenderer:
    """
    Static utility class for rendering shape elements.

    Provides methods to:
    - Render one shape to a QPainter
    - Build the (optionally embossed) fill brush
    - Create preview pixmaps of a whole collection
    """

    @staticmethod
    def fill_color(shape: ShapeElement) -> QColor:
        """Resolve the shape's current fill color, alpha included."""
        color_name, alpha = shape.fill_color
        color = QColor(color_name)
        if alpha is not None:
            color.setAlpha(alpha)
        return color

    @staticmethod
    def fill_brush(color: QColor, width: float, height: float,
                   emboss: Optional[EmbossStyle] = None) -> QBrush:
        """
        Build the fill brush for a shape box.

        Without emboss the brush is a flat color. With emboss it is a linear
        gradient across the box, lighter where the light enters and darker on
        the opposite side, keeping the color's alpha.

        Args:
            color: Fill color
            width: Shape box width
            height: Shape box height
            emboss: Shading style, or None for a flat fill
        """
        if emboss is None:
            return QBrush(color)

        dx, dy = emboss.light_direction
        cx = width / 2.0
        cy = height / 2.0
        gradient = QLinearGradient(
            QPointF(cx - dx * cx, cy - dy * cy),
            QPointF(cx + dx * cx, cy + dy * cy),
        )

        highlight = color.lighter(emboss.highlight_factor)
        shadow = color.darker(emboss.shadow_factor)
        highlight.setAlpha(color.alpha())
        shadow.setAlpha(color.alpha())

        gradient.setColorAt(0.0, highlight)
        gradient.setColorAt(0.5, color)
        gradient.setColorAt(1.0, shadow)
        return QBrush(gradient)

    @staticmethod
    def render(painter: QPainter, shape: ShapeElement):
        """
        Render a shape element to a QPainter.

        Args:
            painter: QPainter in container coordinates
            shape: Shape to render
        """
        width = float(shape.width)
        height = float(shape.height)
        rect = QRectF(0.0, 0.0, width, height)

        painter.save()

        painter.translate(shape.x, shape.y)
        painter.translate(width / 2.0, height / 2.0)
        painter.rotate(shape.rotation)
        painter.translate(-width / 2.0, -height / 2.0)

        color = ShapeRenderer.fill_color(shape)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(ShapeRenderer.fill_brush(color, width, height, shape.emboss))

        BODY_PAINTERS[shape.kind](painter, shape, rect)

        painter.restore()

    @staticmethod
    def render_preview(shapes, size: QSize, antialiasing: bool = True) -> QPixmap:
        """
        Create a preview pixmap of several shapes.

        Args:
            shapes: Iterable of ShapeElement in draw order
            size: Pixmap size
            antialiasing: Whether to smooth edges

        Returns:
            QPixmap with the rendered shapes on a transparent background
        """
        pixmap = QPixmap(size)
        pixmap.fill(Qt.GlobalColor.transparent)

        painter = QPainter(pixmap)
        if antialiasing:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        for shape in shapes:
            ShapeRenderer.render(painter, shape)

        painter.end()
        return pixmap
