"""Tracking ("Where is?") tab widget."""

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QGraphicsView, QGraphicsScene,
                            QLabel, QFrame)
from PyQt5.QtGui import QPainter, QColor, QBrush, QPen, QFont
from PyQt5.QtCore import Qt

from ...core.tracking import AnnotationType, default_region, dummy_locations
from ...utils.config import MapConfig


class MapView(QGraphicsView):
    """Plots fixed pins inside a map region."""

    PIN_COLORS = {
        AnnotationType.CARD: "#1E6FFF",
        AnnotationType.USER: "#2EB84B",
    }
    PIN_RADIUS = 10

    def __init__(self, region, locations, parent=None):
        super().__init__(parent)
        self.region = region
        self.locations = locations
        self.pin_items = {}

        self.setScene(QGraphicsScene(self))
        self.setRenderHint(QPainter.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.NoFrame)
        self.setMinimumHeight(MapConfig.PANEL_HEIGHT)
        self.draw_map(400, MapConfig.PANEL_HEIGHT)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = self.viewport().size()
        self.draw_map(size.width(), size.height())

    def draw_map(self, width, height):
        """Redraw the background grid and the pins for the given size."""
        scene = self.scene()
        scene.clear()
        self.pin_items = {}
        scene.setSceneRect(0, 0, width, height)

        scene.addRect(0, 0, width, height, QPen(Qt.NoPen), QBrush(QColor("#EAF0E6")))
        grid_pen = QPen(QColor("#D5DDD0"))
        for step in range(1, 4):
            scene.addLine(width * step / 4, 0, width * step / 4, height, grid_pen)
            scene.addLine(0, height * step / 4, width, height * step / 4, grid_pen)

        for location in self.locations:
            x, y = self.region.project(location.latitude, location.longitude, width, height)
            color = QColor(self.PIN_COLORS[location.annotation_type])
            r = self.PIN_RADIUS
            pin = scene.addEllipse(x - r, y - r, r * 2, r * 2, QPen(QColor(Qt.white), 2), QBrush(color))
            label = scene.addText(location.label, QFont("Helvetica", 9))
            label.setPos(x - label.boundingRect().width() / 2, y + r)
            self.pin_items[location.id] = pin


class TrackingTab(QWidget):
    """Shows where the physical card is relative to the user."""

    def __init__(self):
        super().__init__()
        self.region = default_region()
        self.locations = dummy_locations()
        self.setup_ui()

    def setup_ui(self):
        """Set up the tracking tab UI."""
        layout = QVBoxLayout()

        title = QLabel("Where is?")
        title.setFont(QFont("Helvetica", 14, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        container = QFrame()
        container.setStyleSheet(
            f"QFrame {{ background-color: white; border-radius: {MapConfig.CORNER_RADIUS}px; }}"
        )
        container_layout = QVBoxLayout()
        container_layout.setContentsMargins(8, 8, 8, 8)
        self.map_view = MapView(self.region, self.locations)
        container_layout.addWidget(self.map_view)
        container.setLayout(container_layout)
        layout.addWidget(container)

        layout.addStretch()
        self.setLayout(layout)
