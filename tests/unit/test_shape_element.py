"""
Unit tests for ShapeElement and its rendering.

Tests:
- Creation, kind conversion and kind immutability
- Mutators and lazy path rebuilding
- Fill color for normal, pressed and disabled shapes
- Drawing onto a QImage
"""

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QImage, QPainter

from models.shape_element import (
    DEFAULT_BASE_COLOR, DISABLED_ALPHA, EmbossStyle, ShapeElement,
)
from models.shape_kind import ShapeKind
from views.shape_renderer import ShapeRenderer


def paint(shapes, width=20, height=20) -> QImage:
    """Draw shapes on a transparent image without antialiasing."""
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    for shape in shapes:
        shape.draw(painter)
    painter.end()
    return image


class TestShapeElement:
    """Tests for ShapeElement state."""

    def test_defaults(self):
        shape = ShapeElement(ShapeKind.RECTANGLE)
        assert shape.bounds == (0, 0, 0, 0)
        assert shape.enabled
        assert not shape.pressed
        assert shape.identifier is None
        assert shape.base_color == DEFAULT_BASE_COLOR
        assert shape.emboss == EmbossStyle()

    def test_kind_from_name(self):
        assert ShapeElement("oval").kind == ShapeKind.OVAL

    def test_unknown_kind_name(self):
        with pytest.raises(ValueError):
            ShapeElement("star")

    def test_kind_is_fixed(self):
        shape = ShapeElement(ShapeKind.RECTANGLE)
        with pytest.raises(AttributeError):
            shape.kind = ShapeKind.OVAL
        assert shape.kind == ShapeKind.RECTANGLE

    def test_identity_equality(self):
        a = ShapeElement(ShapeKind.RECTANGLE, width=10, height=10)
        b = ShapeElement(ShapeKind.RECTANGLE, width=10, height=10)
        assert a != b
        assert a == a

    def test_ordering_by_z(self):
        low = ShapeElement(ShapeKind.RECTANGLE, z_order=1)
        high = ShapeElement(ShapeKind.OVAL, z_order=3)
        assert low < high
        assert sorted([high, low]) == [low, high]

    def test_mutators(self):
        shape = ShapeElement(ShapeKind.ARC)
        shape.set_position(5, 6, 7)
        shape.set_size(30, 40)
        shape.set_rotation(45)
        shape.set_range(10, 20)
        shape.set_thickness(3)
        shape.set_colors(base="#ff000000")
        shape.set_identifier("arc")

        assert shape.bounds == (5, 6, 30, 40)
        assert shape.z_order == 7
        assert shape.rotation == 45
        assert (shape.arc_start, shape.arc_end) == (10, 20)
        assert shape.thickness == 3
        assert shape.base_color == "#ff000000"
        assert shape.accent_color != "#ff000000"
        assert shape.identifier == "arc"

    def test_set_position_keeps_z(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, z_order=4)
        shape.set_position(1, 2)
        assert shape.z_order == 4

    def test_hit_test_uses_state(self, rect_shape):
        assert rect_shape.hit_test(60, 45)
        rect_shape.set_enabled(False)
        assert not rect_shape.hit_test(60, 45)

    def test_measure_extent(self, rect_shape):
        assert rect_shape.measure_extent() == (110, 70)


class TestShapePath:
    """Tests for lazily built outlines."""

    def test_primitives_have_no_path(self):
        assert ShapeElement(ShapeKind.RECTANGLE, width=10, height=10).path is None
        assert ShapeElement(ShapeKind.OVAL, width=10, height=10).path is None

    def test_path_is_cached(self):
        shape = ShapeElement(ShapeKind.TRIANGLE, width=10, height=10)
        assert shape.path is shape.path

    def test_path_rebuilt_after_resize(self):
        shape = ShapeElement(ShapeKind.TRIANGLE, width=10, height=10)
        first = shape.path
        shape.set_size(40, 20)
        assert shape.path is not first
        assert shape.path.boundingRect().width() == pytest.approx(40)

    def test_path_rebuilt_after_range_change(self, ring_shape):
        first = ring_shape.path
        ring_shape.set_range(0, 90)
        assert ring_shape.path is not first

    def test_rotation_keeps_path(self):
        shape = ShapeElement(ShapeKind.ARC, width=10, height=10, arc_end=90)
        first = shape.path
        shape.set_rotation(30)
        shape.set_position(3, 3)
        assert shape.path is first


class TestFillColor:
    """Tests for the current fill color."""

    def test_normal(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, base_color="#ff112233")
        assert shape.fill_color == ("#ff112233", None)

    def test_pressed_uses_accent(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, accent_color="#ff445566")
        shape.set_pressed(True)
        assert shape.fill_color == ("#ff445566", None)

    def test_disabled_dims_base(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, base_color="#ff112233")
        shape.set_pressed(True)
        shape.set_enabled(False)
        assert shape.fill_color == ("#ff112233", DISABLED_ALPHA)

    def test_renderer_color(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, base_color="#ff112233", enabled=False)
        color = ShapeRenderer.fill_color(shape)
        assert color.alpha() == DISABLED_ALPHA
        assert color.red() == 0x11


class TestShapeDrawing:
    """Tests for drawing shapes onto an image."""

    def flat(self, kind, **kwargs) -> ShapeElement:
        return ShapeElement(kind, emboss=None, **kwargs)

    def test_rect_fill(self):
        shape = self.flat(ShapeKind.RECTANGLE, width=20, height=20, base_color="#ffff0000")
        image = paint([shape])
        assert image.pixelColor(10, 10) == QColor(255, 0, 0)

    def test_pressed_fill(self):
        shape = self.flat(ShapeKind.RECTANGLE, width=20, height=20,
                          base_color="#ffff0000", accent_color="#ff0000ff")
        shape.set_pressed(True)
        image = paint([shape])
        assert image.pixelColor(10, 10) == QColor(0, 0, 255)

    def test_disabled_is_translucent(self):
        shape = self.flat(ShapeKind.RECTANGLE, width=20, height=20,
                          base_color="#ffff0000", enabled=False)
        color = paint([shape]).pixelColor(10, 10)
        assert abs(color.alpha() - DISABLED_ALPHA) <= 1
        assert color.red() >= 250

    def test_position_offsets_drawing(self):
        shape = self.flat(ShapeKind.RECTANGLE, x=10, y=10, width=10, height=10,
                          base_color="#ffff0000")
        image = paint([shape])
        assert image.pixelColor(15, 15).alpha() == 255
        assert image.pixelColor(5, 5).alpha() == 0

    def test_rotation_turns_about_center(self):
        """A 20x10 bar centered in the image stands upright at 90°."""
        shape = self.flat(ShapeKind.RECTANGLE, x=0, y=5, width=20, height=10,
                          rotation=90, base_color="#ffff0000")
        image = paint([shape])
        assert image.pixelColor(10, 1).alpha() == 255
        assert image.pixelColor(1, 10).alpha() == 0

    def test_oval_leaves_corners(self):
        shape = self.flat(ShapeKind.OVAL, width=20, height=20, base_color="#ffff0000")
        image = paint([shape])
        assert image.pixelColor(10, 10).alpha() == 255
        assert image.pixelColor(0, 0).alpha() == 0

    def test_ring_leaves_hole(self):
        shape = self.flat(ShapeKind.ARC, width=40, height=40, arc_end=360,
                          thickness=8, base_color="#ffff0000")
        image = paint([shape], 40, 40)
        assert image.pixelColor(20, 3).alpha() == 255
        assert image.pixelColor(20, 20).alpha() == 0

    def test_later_shapes_paint_over(self):
        bottom = self.flat(ShapeKind.RECTANGLE, width=20, height=20, base_color="#ffff0000")
        top = self.flat(ShapeKind.RECTANGLE, width=20, height=20, base_color="#ff00ff00")
        image = paint([bottom, top])
        assert image.pixelColor(10, 10) == QColor(0, 255, 0)

    def test_emboss_shades_across_shape(self):
        shape = ShapeElement(ShapeKind.RECTANGLE, width=100, height=100,
                             base_color="#ff808080")
        image = paint([shape], 100, 100)
        lit = image.pixelColor(5, 5)
        shaded = image.pixelColor(95, 95)
        assert lit.lightness() > shaded.lightness()
        assert lit.alpha() == 255


class TestFillBrush:

    def test_flat_brush(self):
        brush = ShapeRenderer.fill_brush(QColor("#ff0000"), 10, 10, None)
        assert brush.style() == Qt.BrushStyle.SolidPattern

    def test_embossed_brush(self):
        brush = ShapeRenderer.fill_brush(QColor("#ff0000"), 10, 10, EmbossStyle())
        assert brush.style() == Qt.BrushStyle.LinearGradientPattern

    def test_emboss_factors(self):
        style = EmbossStyle(ambient=0.5, specular=2.0)
        assert style.highlight_factor == 120
        assert style.shadow_factor == 200
