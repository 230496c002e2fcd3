"""
Shape Element Model.

One clickable shape inside a shape button: its kind, placement, rotation,
arc range, colors and interaction state.

Key concepts:
- ShapeElement: state of one shape plus its hit-test and measure operations
- EmbossStyle: fixed shading applied to every fill of an element
- Colors are stored as "#AARRGGBB" strings
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .shape_geometry import hit_test, needed_extent
from .shape_kind import PATH_KINDS, ShapeKind


DEFAULT_BASE_COLOR = "#ffd6d6d6"
DEFAULT_ACCENT_COLOR = "#ff33add6"

# Alpha used to paint disabled shapes, out of 255
DISABLED_ALPHA = 128


@dataclass(frozen=True)
class EmbossStyle:
    """
    Simulated emboss shading.

    Attributes:
        light_direction: Direction the light travels in (x, y), canvas axes
        ambient: Ambient light level (0.0 to 1.0), lower means deeper shadows
        specular: Strength of the highlight on the lit side
    """
    light_direction: Tuple[float, float] = (1.0, 1.0)
    ambient: float = 0.8
    specular: float = 3.0

    @property
    def highlight_factor(self) -> int:
        """QColor.lighter() factor for the lit side."""
        return int(100 + self.specular * 10)

    @property
    def shadow_factor(self) -> int:
        """QColor.darker() factor for the shaded side."""
        return int(100 / max(self.ambient, 0.01))


@dataclass(eq=False)
class ShapeElement:
    """
    A single interactive shape.

    Elements compare by identity; two shapes with the same settings are still
    distinct. Ordering uses z_order only.

    Attributes:
        kind: Kind of shape (fixed at creation)
        x: Left position in pixels
        y: Top position in pixels
        width: Width in pixels
        height: Height in pixels
        z_order: Paint and hit-test priority (higher is drawn later, tested first)
        rotation: Rotation in degrees about the shape center
        arc_start: Sweep start in degrees (arcs only)
        arc_end: Sweep end in degrees (arcs only)
        thickness: Ring thickness for arcs, 0 draws a filled wedge.
            Expected to stay below min(width, height) / 2.
        base_color: Normal and disabled fill color
        accent_color: Pressed fill color
        enabled: Disabled shapes ignore touches and are painted dimmed
        pressed: Transient pressed state
        identifier: Value reported when the shape is clicked
        emboss: Shading applied to the fill, None for flat fills
    """
    kind: ShapeKind
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    z_order: int = 0
    rotation: int = 0
    arc_start: int = 0
    arc_end: int = 0
    thickness: int = 0
    base_color: str = DEFAULT_BASE_COLOR
    accent_color: str = DEFAULT_ACCENT_COLOR
    enabled: bool = True
    pressed: bool = False
    identifier: Optional[str] = None
    emboss: Optional[EmbossStyle] = field(default_factory=EmbossStyle)

    _path: Any = field(default=None, init=False, repr=False)
    _path_key: Optional[tuple] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Convert a string kind to the enum, then lock it."""
        if isinstance(self.kind, str):
            self.kind = ShapeKind(self.kind)
        object.__setattr__(self, "_kind_locked", True)

    def __setattr__(self, name, value):
        if name == "kind" and getattr(self, "_kind_locked", False):
            raise AttributeError("kind cannot change once a shape is created")
        super().__setattr__(name, value)

    def __lt__(self, other: "ShapeElement") -> bool:
        return self.z_order < other.z_order

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def path(self):
        """
        Outline QPainterPath for triangles and arcs, None for other kinds.

        The path depends on size, arc range and thickness only; it is rebuilt
        on first access after one of them changes.
        """
        if self.kind not in PATH_KINDS:
            return None

        key = (self.width, self.height, self.arc_start, self.arc_end, self.thickness)
        if self._path is None or key != self._path_key:
            from services.shape_paths import build_shape_path
            self._path = build_shape_path(self.kind, self.width, self.height,
                                          self.arc_start, self.arc_end,
                                          self.thickness)
            self._path_key = key
        return self._path

    def hit_test(self, x: float, y: float) -> bool:
        """Check whether a point in container coordinates hits this shape."""
        return hit_test(self.kind, self.bounds, self.thickness,
                        self.arc_start, self.arc_end, self.rotation,
                        x, y, enabled=self.enabled)

    def measure_extent(self) -> Tuple[int, int]:
        """Container size needed to show this shape at its rotation."""
        return needed_extent(self.x, self.y, self.width, self.height, self.rotation)

    @property
    def fill_color(self) -> Tuple[str, Optional[int]]:
        """
        Current fill color and alpha override.

        Returns:
            (color, alpha) where alpha is DISABLED_ALPHA for disabled shapes
            and None otherwise
        """
        if not self.enabled:
            return self.base_color, DISABLED_ALPHA
        if self.pressed:
            return self.accent_color, None
        return self.base_color, None

    def draw(self, painter):
        """Draw the shape on a QPainter in container coordinates."""
        from views.shape_renderer import ShapeRenderer
        ShapeRenderer.render(painter, self)

    # =========================================================================
    # Mutators
    # =========================================================================

    def set_position(self, x: int, y: int, z: Optional[int] = None):
        """Move the shape, optionally changing its z-order as well."""
        self.x = x
        self.y = y
        if z is not None:
            self.z_order = z

    def set_size(self, width: int, height: int):
        """Resize the shape (pixels)."""
        self.width = width
        self.height = height

    def set_rotation(self, degrees: int):
        """Set the rotation about the shape center."""
        self.rotation = degrees

    def set_range(self, start: int, end: int):
        """Set the arc sweep range in degrees."""
        self.arc_start = start
        self.arc_end = end

    def set_thickness(self, thickness: int):
        """Set the ring thickness for arcs."""
        self.thickness = thickness

    def set_colors(self, base: Optional[str] = None, accent: Optional[str] = None):
        """Set the base and/or accent color."""
        if base is not None:
            self.base_color = base
        if accent is not None:
            self.accent_color = accent

    def set_z_order(self, z_order: int):
        self.z_order = z_order

    def set_identifier(self, identifier: Optional[str]):
        self.identifier = identifier

    def set_pressed(self, pressed: bool):
        self.pressed = pressed

    def set_enabled(self, enabled: bool):
        self.enabled = enabled


__all__ = [
    "DEFAULT_BASE_COLOR",
    "DEFAULT_ACCENT_COLOR",
    "DISABLED_ALPHA",
    "EmbossStyle",
    "ShapeElement",
]
