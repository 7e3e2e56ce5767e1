"""
Vertical fill gauge drawn on either side of the engine order telegraph.
"""
from typing import List

from PyQt5 import QtCore
from PyQt5.QtGui import QColor, QFont, QPainter, QPen
from PyQt5.QtWidgets import QWIDGETSIZE_MAX, QSizePolicy, QWidget

from telegraph.ticks import Tick
from ui.styles import RAIL_FILL, RAIL_TICK, RAIL_TICK_STRONG, RAIL_TRACK, RAIL_WIDTH, TEXT_COLOR_DIM

TRACK_WIDTH = 10
TICK_LENGTH = 6
TICK_LENGTH_STRONG = 11


class RailGauge(QWidget):
    """
    Presentational rail: track, fill from the bottom, and tick scale.

    Only receives derived numbers from the telegraph; ticks and labels are
    drawn on the outboard side (`side` = "left" or "right").
    """

    def __init__(self, side: str = "left", parent=None):
        super().__init__(parent)
        if side not in ("left", "right"):
            raise ValueError(f"Unknown rail side '{side}'")
        self.side = side
        self.stack_height = 0.0
        self.fill_height = 0.0
        self.ticks: List[Tick] = []

        self.setFixedWidth(RAIL_WIDTH)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)

    def set_geometry_data(self, stack_height: float, fill_height: float, ticks: List[Tick]):
        self.stack_height = stack_height
        self.fill_height = fill_height
        self.ticks = list(ticks)
        if stack_height > 0:
            self.setFixedHeight(round(stack_height))
        else:
            self.setMinimumHeight(0)
            self.setMaximumHeight(QWIDGETSIZE_MAX)
        self.update()

    def _track_x(self) -> int:
        # Track sits on the inboard edge, next to the telegraph
        if self.side == "left":
            return self.width() - TRACK_WIDTH
        return 0

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        h = self.height()
        x = self._track_x()

        p.fillRect(x, 0, TRACK_WIDTH, h, QColor(RAIL_TRACK))

        fill = max(0.0, min(float(h), self.fill_height))
        if fill > 0:
            p.fillRect(QtCore.QRectF(x, h - fill, TRACK_WIDTH, fill), QColor(RAIL_FILL))

        font = QFont(self.font())
        font.setPointSize(7)
        p.setFont(font)

        for tick in self.ticks:
            y = h - tick.y_offset
            length = TICK_LENGTH_STRONG if tick.major else TICK_LENGTH
            pen = QPen(QColor(RAIL_TICK_STRONG if tick.major else RAIL_TICK))
            pen.setWidthF(1.5 if tick.major else 1.0)
            p.setPen(pen)

            if self.side == "left":
                x0, x1 = x - length, x
                label_rect = QtCore.QRectF(0, y - 6, x0 - 3, 12)
                align = QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter
            else:
                x0, x1 = x + TRACK_WIDTH, x + TRACK_WIDTH + length
                label_rect = QtCore.QRectF(x1 + 3, y - 6, self.width() - x1 - 3, 12)
                align = QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter

            p.drawLine(QtCore.QPointF(x0, y), QtCore.QPointF(x1, y))
            p.setPen(QColor(TEXT_COLOR_DIM))
            p.drawText(label_rect, align, str(tick.value))

        p.end()
