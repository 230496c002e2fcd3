"""Services package."""

from .settings_manager import (
    SettingsManager,
    AppSettings,
    DisplaySettings,
    ShapeDefaults,
    UISettings,
    get_settings,
    reset_settings_manager,
)
from .shape_paths import (
    build_triangle_path,
    build_arc_path,
    build_shape_path,
)
from .shape_config import (
    ShapeConfigError,
    parse_pixel_size,
    parse_color,
    parse_shapes_xml,
    parse_shapes_json,
    load_shapes,
)

__all__ = [
    "SettingsManager",
    "AppSettings",
    "DisplaySettings",
    "ShapeDefaults",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
    # Outlines
    "build_triangle_path",
    "build_arc_path",
    "build_shape_path",
    # Shape files
    "ShapeConfigError",
    "parse_pixel_size",
    "parse_color",
    "parse_shapes_xml",
    "parse_shapes_json",
    "load_shapes",
]
