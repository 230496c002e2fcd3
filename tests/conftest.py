"""
Pytest configuration and shared fixtures for shape button tests.
"""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from PyQt6.QtWidgets import QApplication

from models.shape_collection import ShapeCollection
from models.shape_element import ShapeElement
from models.shape_kind import ShapeKind
from services.settings_manager import get_settings, reset_settings_manager


SAMPLES_DIR = Path(__file__).parent.parent / "samples"


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session", autouse=True)
def qapp() -> QApplication:
    """Single QApplication shared by the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


# ============== Settings Fixtures ==============

@pytest.fixture(autouse=True)
def isolated_settings(temp_dir: Path):
    """Point the global settings manager at a throwaway file."""
    reset_settings_manager()
    settings = get_settings(config_override=str(temp_dir / "settings.json"))
    yield settings
    reset_settings_manager()


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="shape_button_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# ============== Model Fixtures ==============

@pytest.fixture
def rect_shape() -> ShapeElement:
    """100x50 rectangle at (10, 20)."""
    return ShapeElement(ShapeKind.RECTANGLE, x=10, y=20, width=100, height=50,
                        identifier="rect")


@pytest.fixture
def ring_shape() -> ShapeElement:
    """200x200 full ring, 40 pixels thick."""
    return ShapeElement(ShapeKind.ARC, width=200, height=200,
                        arc_start=0, arc_end=360, thickness=40,
                        identifier="ring")


@pytest.fixture
def click_log() -> list:
    """List collecting clicked identifiers."""
    return []


@pytest.fixture
def collection(click_log) -> ShapeCollection:
    """Empty collection recording clicks into click_log."""
    return ShapeCollection(on_click=click_log.append)


@pytest.fixture
def stacked_collection(collection) -> ShapeCollection:
    """Two overlapping squares; "top" has the higher z-order."""
    collection.add_shape(ShapeElement(ShapeKind.RECTANGLE, width=100, height=100,
                                      z_order=1, identifier="top"))
    collection.add_shape(ShapeElement(ShapeKind.RECTANGLE, width=100, height=100,
                                      z_order=0, identifier="bottom"))
    return collection


# ============== Shape File Fixtures ==============

@pytest.fixture
def shapes_xml(temp_dir: Path) -> Path:
    """XML shape file with one shape of each kind and one unknown kind."""
    path = temp_dir / "shapes.xml"
    path.write_text("""<?xml version="1.0" encoding="utf-8"?>
<shapes>
    <rect id="a" x="10px" y="5" z="2" width="40dp" height="20dp" base="#ff0000" />
    <oval id="b" WIDTH="30" HEIGHT="30" accent="#8000ff00" />
    <triangle id="c" x="50" width="20" height="20" angle="90" />
    <arc id="d" width="100" height="100" start="350" end="10" thickness="10dp" />
    <star id="e" width="10" height="10" />
</shapes>
""", encoding="utf-8")
    return path


@pytest.fixture
def shapes_json(temp_dir: Path) -> Path:
    """JSON shape file with two shapes."""
    path = temp_dir / "shapes.json"
    path.write_text("""{
    "shapes": [
        {"kind": "rect", "id": "left", "width": "50dp", "height": 40},
        {"kind": "oval", "id": "right", "x": 60, "width": 40, "height": 40, "z": 1}
    ]
}
""", encoding="utf-8")
    return path


@pytest.fixture
def samples_dir() -> Path:
    """Directory holding the bundled sample shape files."""
    return SAMPLES_DIR
