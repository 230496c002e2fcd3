"""Views package."""

from .shape_renderer import ShapeRenderer
from .shape_button import ShapeButton
from .demo_window import DemoWindow

__all__ = [
    "ShapeRenderer",
    "ShapeButton",
    "DemoWindow",
]
