"""
Shape Configuration Reader.

Turns declarative shape descriptions into ShapeElement objects.

Two formats are accepted:

XML, where every element named after a shape kind is one shape::

    <shapes>
        <oval id="center" x="30dp" y="30dp" z="2" width="40dp" height="40dp"
              base="#D6D6D6" accent="#33ADD6" />
        <arc id="ring" width="100dp" height="100dp" start="0" end="90"
             thickness="20dp" />
    </shapes>

JSON, with the same attribute names and a "kind" key::

    {"shapes": [{"kind": "rect", "id": "a", "x": 0, "width": "40dp", "height": 20}]}

Sizes (x, y, z, width, height, thickness) take "px" or "dp" suffixes or bare
pixel integers. Angles (angle, start, end) are plain integers. Colors take
anything QColor understands, such as "#RGB", "#RRGGBB", "#AARRGGBB" or SVG
color names.

Unknown shape kinds are skipped with a warning. Any malformed value makes
the whole source fail with ShapeConfigError; no partial list is returned.
"""

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from PyQt6.QtGui import QColor

from models.shape_element import EmbossStyle, ShapeElement
from models.shape_kind import ShapeKind
from services.settings_manager import ShapeDefaults


logger = logging.getLogger(__name__)


class ShapeConfigError(Exception):
    """Raised when a shape configuration source cannot be read."""


# =============================================================================
# Value parsing
# =============================================================================

def parse_pixel_size(value: Union[str, int, None], density: float = 1.0) -> int:
    """
    Convert a size value to pixels.

    Args:
        value: "12px", "12dp", "12", an int, or empty
        density: Pixels per dp

    Returns:
        Size in whole pixels (0 for empty values)

    Raises:
        ValueError: If the number part is not an integer
    """
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    text = str(value).strip()
    if not text:
        return 0
    if text.endswith("px"):
        return int(text[:-2])
    if text.endswith("dp"):
        dp = int(text[:-2])
        return int(dp * density + 0.5)
    return int(text)


def parse_int(value: Union[str, int, None]) -> int:
    """Parse a plain integer value such as an angle; empty means 0."""
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not text:
        return 0
    return int(text)


def parse_color(value: str) -> str:
    """
    Normalize a color value to "#aarrggbb".

    Raises:
        ValueError: If QColor does not recognize the value
    """
    color = QColor(str(value).strip())
    if not color.isValid():
        raise ValueError(f"Unknown color: {value!r}")
    return color.name(QColor.NameFormat.HexArgb)


# =============================================================================
# Records
# =============================================================================

def shape_from_record(kind: ShapeKind,
                      record: Mapping[str, Any],
                      density: float = 1.0,
                      defaults: Optional[ShapeDefaults] = None) -> ShapeElement:
    """
    Build a shape from one configuration record.

    Args:
        kind: Shape kind
        record: Attribute values; names are matched case-insensitively
        density: Pixels per dp for size values
        defaults: Default colors and shading

    Returns:
        New ShapeElement

    Raises:
        ValueError: On malformed numbers or colors
    """
    defaults = defaults or ShapeDefaults()
    values = {str(key).lower(): value for key, value in record.items()}

    shape = ShapeElement(
        kind,
        base_color=parse_color(values.get("base", defaults.base_color)),
        accent_color=parse_color(values.get("accent", defaults.accent_color)),
        emboss=EmbossStyle() if defaults.emboss else None,
    )

    shape.set_position(
        parse_pixel_size(values.get("x"), density),
        parse_pixel_size(values.get("y"), density),
        parse_pixel_size(values.get("z"), density),
    )
    shape.set_size(
        parse_pixel_size(values.get("width"), density),
        parse_pixel_size(values.get("height"), density),
    )
    shape.set_rotation(parse_int(values.get("angle")))
    shape.set_range(parse_int(values.get("start")), parse_int(values.get("end")))
    shape.set_thickness(parse_pixel_size(values.get("thickness"), density))

    if values.get("id") is not None:
        shape.set_identifier(str(values["id"]))

    return shape


def _kind_or_warn(name: Optional[str]) -> Optional[ShapeKind]:
    kind = ShapeKind.from_name(name) if name is not None else None
    if kind is None:
        logger.warning(f"Unknown shape type: {name}")
    return kind


def shapes_from_records(records: Iterable[Mapping[str, Any]],
                        density: float = 1.0,
                        defaults: Optional[ShapeDefaults] = None) -> List[ShapeElement]:
    """Build shapes from JSON-style records carrying a "kind" key."""
    shapes = []
    for record in records:
        kind = _kind_or_warn(record.get("kind"))
        if kind is None:
            continue
        attributes = {k: v for k, v in record.items() if k != "kind"}
        shapes.append(shape_from_record(kind, attributes, density, defaults))
    return shapes


# =============================================================================
# Sources
# =============================================================================

def parse_shapes_xml(text: str,
                     density: float = 1.0,
                     defaults: Optional[ShapeDefaults] = None) -> List[ShapeElement]:
    """
    Parse shapes from XML text.

    Every element whose tag is a shape kind becomes a shape, in document
    order. The root element is treated as a container unless its own tag is
    a shape kind.

    Raises:
        ET.ParseError: On malformed XML
        ValueError: On malformed values
    """
    root = ET.fromstring(text)
    shapes = []
    for node in root.iter():
        if node is root and ShapeKind.from_name(node.tag) is None:
            continue
        kind = _kind_or_warn(node.tag)
        if kind is None:
            continue
        shapes.append(shape_from_record(kind, node.attrib, density, defaults))
    return shapes


def parse_shapes_json(text: str,
                      density: float = 1.0,
                      defaults: Optional[ShapeDefaults] = None) -> List[ShapeElement]:
    """
    Parse shapes from JSON text.

    Accepts either a list of records or an object with a "shapes" list.

    Raises:
        ValueError: On malformed JSON or values
    """
    data = json.loads(text)
    records = data.get("shapes", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError("Expected a list of shape records")
    return shapes_from_records(records, density, defaults)


def load_shapes(source: Union[str, Path, None],
                density: float = 1.0,
                defaults: Optional[ShapeDefaults] = None) -> List[ShapeElement]:
    """
    Load shapes from an XML or JSON file.

    Files ending in ".json" are read as JSON, anything else as XML.

    Args:
        source: File path; None or empty means no shapes
        density: Pixels per dp for size values
        defaults: Default colors and shading

    Returns:
        Shapes in file order (not yet sorted by z-order)

    Raises:
        ShapeConfigError: If the file cannot be read or holds malformed values
    """
    if not source:
        return []

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            shapes = parse_shapes_json(text, density, defaults)
        else:
            shapes = parse_shapes_xml(text, density, defaults)
    except (OSError, ET.ParseError, ValueError, TypeError, AttributeError) as e:
        raise ShapeConfigError(
            f"Error while reading shape configuration {path}: {e}"
        ) from e

    logger.debug(f"Loaded {len(shapes)} shapes from {path}")
    return shapes


__all__ = [
    "ShapeConfigError",
    "parse_pixel_size",
    "parse_int",
    "parse_color",
    "shape_from_record",
    "shapes_from_records",
    "parse_shapes_xml",
    "parse_shapes_json",
    "load_shapes",
]
