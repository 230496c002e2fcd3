"""
Demo window.

Lists the sample shape files and shows the selected one in a ShapeButton.
Clicking a shape reports its identifier in the status bar. The File menu
opens other shape files and lists recently opened ones.
"""

import logging
from pathlib import Path
from typing import List, Optional

from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QAction, QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QListWidget, QListWidgetItem, QMessageBox, QLabel, QFrame, QFileDialog,
)

from services.settings_manager import get_settings
from services.shape_config import ShapeConfigError, load_shapes
from views.shape_button import ShapeButton
from views.shape_renderer import ShapeRenderer


logger = logging.getLogger(__name__)

SAMPLE_SUFFIXES = (".xml", ".json")
PREVIEW_SIZE = 32


def find_sample_files(directory: Path) -> List[Path]:
    """Sorted shape files in a directory."""
    if not directory.is_dir():
        return []
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SAMPLE_SUFFIXES
    )


class DemoWindow(QMainWindow):
    """Sample browser for shape buttons."""

    def __init__(self, shapes_file: Optional[str] = None, parent=None,
                 density: Optional[float] = None):
        super().__init__(parent)
        self.settings_manager = get_settings()
        self.density = density if density is not None else self.settings_manager.density
        self.shape_button: Optional[ShapeButton] = None

        self._setup_window()
        self._setup_ui()
        self._setup_menu()
        self._load_window_settings()

        if shapes_file:
            self.show_shapes(Path(shapes_file))
        elif self.sample_list.count():
            self.sample_list.setCurrentRow(0)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("Shape Button Samples")
        self.setMinimumSize(480, 320)
        self.resize(720, 480)
        self.setStyleSheet("""
            QMainWindow {
                background: #F3F4F6;
            }
            QListWidget {
                background: white;
                border: 1px solid #E5E7EB;
                border-radius: 8px;
            }
        """)

    def _setup_ui(self):
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.sample_list = QListWidget()
        self.sample_list.setFixedWidth(200)
        self.sample_list.setIconSize(QSize(PREVIEW_SIZE, PREVIEW_SIZE))
        self.sample_list.currentItemChanged.connect(self._on_sample_selected)
        layout.addWidget(self.sample_list)

        self.button_frame = QFrame()
        self.button_frame.setStyleSheet("QFrame { background: white; border-radius: 8px; }")
        self.button_layout = QVBoxLayout(self.button_frame)
        self.button_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.placeholder = QLabel("Select a sample")
        self.placeholder.setStyleSheet("color: #6B7280;")
        self.button_layout.addWidget(self.placeholder)
        layout.addWidget(self.button_frame, 1)

        self.setCentralWidget(central)
        self._populate_samples()

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        open_action = QAction("&Open...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self._on_open_file)
        file_menu.addAction(open_action)

        # Rebuilt each time it opens so missing files drop out
        self.recent_menu = file_menu.addMenu("Open &Recent")
        self.recent_menu.aboutToShow.connect(self._populate_recent_menu)
        self._populate_recent_menu()

        file_menu.addSeparator()

        self.reset_settings_action = QAction("Reset &Settings", self)
        self.reset_settings_action.triggered.connect(self._on_reset_settings)
        file_menu.addAction(self.reset_settings_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def _populate_recent_menu(self):
        """List recently opened shape files."""
        self.recent_menu.clear()
        recent = self.settings_manager.get_recent_files()
        if not recent:
            empty_action = self.recent_menu.addAction("No recent files")
            empty_action.setEnabled(False)
            return

        for file_path in recent:
            action = self.recent_menu.addAction(Path(file_path).name)
            action.setToolTip(file_path)
            action.triggered.connect(
                lambda checked=False, p=file_path: self.show_shapes(Path(p))
            )

    def _on_open_file(self):
        """Open a shape file chosen by the user."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Shape File",
            str(self.settings_manager.get_samples_directory()),
            "Shape Files (*.xml *.json);;All Files (*)"
        )
        if file_path:
            self.show_shapes(Path(file_path))

    def _on_reset_settings(self):
        """Restore default settings and forget recent files."""
        self.settings_manager.reset()
        self._populate_recent_menu()
        self.statusBar().showMessage("Settings reset", 3000)

    def _populate_samples(self):
        """Fill the list with sample files and small previews."""
        samples_dir = self.settings_manager.get_samples_directory()
        defaults = self.settings_manager.shape_defaults
        density = self.density

        for path in find_sample_files(samples_dir):
            item = QListWidgetItem(path.stem.replace("_", " ").title())
            item.setData(Qt.ItemDataRole.UserRole, str(path))
            try:
                shapes = sorted(load_shapes(path, density, defaults),
                                key=lambda s: s.z_order)
            except ShapeConfigError as e:
                logger.warning(f"Skipping sample {path.name}: {e}")
                continue
            item.setIcon(QIcon(self._preview(shapes)))
            self.sample_list.addItem(item)

        logger.info(f"Found {self.sample_list.count()} samples in {samples_dir}")

    def _preview(self, shapes):
        """Render shapes scaled into a list icon."""
        width = max((s.measure_extent()[0] for s in shapes), default=1)
        height = max((s.measure_extent()[1] for s in shapes), default=1)
        full = ShapeRenderer.render_preview(shapes, QSize(max(width, 1), max(height, 1)))
        return full.scaled(
            PREVIEW_SIZE, PREVIEW_SIZE,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )

    def _on_sample_selected(self, current: Optional[QListWidgetItem], previous=None):
        if current is None:
            return
        self.show_shapes(Path(current.data(Qt.ItemDataRole.UserRole)))

    def show_shapes(self, path: Path):
        """Replace the displayed button with one built from a shape file."""
        try:
            button = ShapeButton(path, density=self.density)
        except ShapeConfigError as e:
            logger.error(str(e))
            QMessageBox.critical(self, "Error", f"Failed to load shapes:\n{e}")
            return

        button.shapeClicked.connect(self._on_shape_clicked)

        if self.shape_button is not None:
            self.button_layout.removeWidget(self.shape_button)
            self.shape_button.deleteLater()
        self.placeholder.hide()

        self.shape_button = button
        self.button_layout.addWidget(button, 0, Qt.AlignmentFlag.AlignCenter)
        self.settings_manager.add_recent_file(str(path))
        self.statusBar().showMessage(f"Loaded {path.name} ({len(button.collection)} shapes)", 3000)

    def _on_shape_clicked(self, identifier: str):
        logger.debug(f"Clicked {identifier}")
        self.statusBar().showMessage(identifier, 2000)

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            bytes(self.saveGeometry()),
            bytes(self.saveState())
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)
