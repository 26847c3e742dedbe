"""Physical card widget."""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtGui import QPainter, QLinearGradient, QColor, QBrush, QFont, QPainterPath, QPen
from PyQt5.QtCore import Qt, QRectF, pyqtSignal

from ...utils.config import PhysicalCardConfig


class PhysicalCardWidget(QWidget):
    """Draws the physical One-Link card. Clicking it opens the map."""

    # Signals
    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(PhysicalCardConfig.HEIGHT + 20)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip("Where is my card?")

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)

    def card_rect(self):
        """Area of the card inside the widget margins."""
        return QRectF(10, 10, self.width() - 20, PhysicalCardConfig.HEIGHT)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        rect = self.card_rect()
        radius = PhysicalCardConfig.CORNER_RADIUS

        # Shadow
        shadow = QPainterPath()
        shadow.addRoundedRect(rect.translated(0, 5), radius, radius)
        painter.fillPath(shadow, QBrush(QColor(0, 0, 0, 60)))

        # Background gradient
        gradient = QLinearGradient(rect.topLeft(), rect.bottomRight())
        gradient.setColorAt(0, QColor(PhysicalCardConfig.GRADIENT_START))
        gradient.setColorAt(1, QColor(PhysicalCardConfig.GRADIENT_END))
        background = QPainterPath()
        background.addRoundedRect(rect, radius, radius)
        painter.fillPath(background, QBrush(gradient))

        padding = 16
        left = rect.left() + padding
        right = rect.right() - padding
        accent = QColor(PhysicalCardConfig.ACCENT)

        # Brand and contactless mark
        painter.setPen(Qt.white)
        painter.setFont(QFont("Helvetica", 20, QFont.Bold))
        painter.drawText(QRectF(left, rect.top() + padding, rect.width() / 2, 32),
                         Qt.AlignLeft | Qt.AlignVCenter, PhysicalCardConfig.BRAND)
        self._draw_contactless(painter, right - 24, rect.top() + padding + 16, accent)

        # Card number
        number_rect = QRectF(left, rect.top() + 64, 250, 34)
        number_box = QPainterPath()
        number_box.addRoundedRect(number_rect, 8, 8)
        painter.fillPath(number_box, QBrush(QColor(0, 0, 0, 50)))
        painter.setPen(Qt.white)
        painter.setFont(QFont("Courier New", 14))
        painter.drawText(number_rect, Qt.AlignCenter, PhysicalCardConfig.MASKED_NUMBER)

        # Cardholder and expiry
        caption_font = QFont("Helvetica", 8)
        value_font = QFont("Helvetica", 12, QFont.Bold)
        caption_color = QColor(255, 255, 255, 180)
        row_top = rect.top() + 112

        painter.setFont(caption_font)
        painter.setPen(caption_color)
        painter.drawText(QRectF(left, row_top, 200, 16), Qt.AlignLeft, PhysicalCardConfig.HOLDER_LABEL)
        painter.drawText(QRectF(right - 120, row_top, 120, 16), Qt.AlignRight, PhysicalCardConfig.EXPIRY_LABEL)

        painter.setFont(value_font)
        painter.setPen(Qt.white)
        painter.drawText(QRectF(left, row_top + 18, 200, 22), Qt.AlignLeft, PhysicalCardConfig.HOLDER_NAME)
        painter.drawText(QRectF(right - 120, row_top + 18, 120, 22), Qt.AlignRight, PhysicalCardConfig.EXPIRY)

        # Chip and second contactless mark
        chip = QPainterPath()
        chip.addRoundedRect(QRectF(left, rect.bottom() - padding - 36, 44, 32), 6, 6)
        painter.fillPath(chip, QBrush(QColor("#D4AF37")))
        self._draw_contactless(painter, right - 24, rect.bottom() - padding - 20, accent)

        painter.end()

    def _draw_contactless(self, painter, x, y, color):
        """Three arcs opening to the right."""
        pen = QPen(color)
        pen.setWidth(2)
        painter.setPen(pen)
        for radius in (6, 11, 16):
            painter.drawArc(QRectF(x - radius, y - radius, radius * 2, radius * 2), -60 * 16, 120 * 16)
