"""Shape kinds understood by shape buttons."""

from enum import Enum


class ShapeKind(Enum):
    """
    Kind of a shape element.

    The value is the name used in shape configuration files and is matched
    case-sensitively.
    """
    RECTANGLE = "rect"
    OVAL = "oval"
    TRIANGLE = "triangle"
    ARC = "arc"

    @classmethod
    def from_name(cls, name: str):
        """Return the kind for a configuration name, or None if unknown."""
        for kind in cls:
            if kind.value == name:
                return kind
        return None


# Kinds drawn from a constructed outline rather than a raw primitive
PATH_KINDS = frozenset({ShapeKind.TRIANGLE, ShapeKind.ARC})
