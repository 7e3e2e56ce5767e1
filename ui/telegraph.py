"""
Engine order telegraph widget with mirrored rail gauges.
"""
from contextlib import contextmanager
from typing import List, Optional

from PyQt5 import QtCore
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from telegraph.control import TelegraphFrame, TelegraphModel
from telegraph.detents import DETENTS, detent_title
from telegraph.layout import ViewportDimensionProvider
from ui.rail_gauge import RailGauge
from ui.styles import TELEGRAPH_HEIGHT_TOKENS, TELEGRAPH_WIDTH


class TelegraphWidget(QWidget):
    """
    Detent buttons flanked by two rail gauges.

    Detent heights follow the top-level window height: the layout is
    re-measured when the widget is shown and on every window resize, and
    the subscription to window resizes is dropped again when it is hidden.

    Signals:
        speed_requested(float speed) - a detent button was pressed
    """

    speed_requested = QtCore.pyqtSignal(float)

    def __init__(self, parent=None, detents=DETENTS, tokens=TELEGRAPH_HEIGHT_TOKENS):
        super().__init__(parent)

        self.provider = ViewportDimensionProvider(tokens)
        self.model = TelegraphModel(
            self.provider, detents, on_speed_request=self.speed_requested.emit
        )
        self.speed = 0.0
        self.current_frame: Optional[TelegraphFrame] = None

        self._viewport: Optional[QWidget] = None

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        self.setLayout(layout)

        self.left_rail = RailGauge("left", self)
        self.right_rail = RailGauge("right", self)

        bezel = QFrame(self)
        bezel.setFixedWidth(TELEGRAPH_WIDTH)
        stack = QVBoxLayout()
        stack.setContentsMargins(0, 0, 0, 0)
        stack.setSpacing(0)
        bezel.setLayout(stack)

        # Button order comes from the catalog, same as the geometry
        self.buttons: List[QPushButton] = []
        for i, detent in enumerate(self.model.detents):
            btn = QPushButton("\n".join(detent.label), bezel)
            btn.setToolTip(detent_title(detent))
            btn.setProperty("role", "detent")
            btn.setProperty("stop", detent.target_speed == 0)
            btn.setProperty("active", False)
            btn.clicked.connect(lambda _checked=False, idx=i: self.model.press(idx))
            stack.addWidget(btn)
            self.buttons.append(btn)

        layout.addWidget(self.left_rail, 0, QtCore.Qt.AlignBottom)
        layout.addWidget(bezel, 0, QtCore.Qt.AlignBottom)
        layout.addWidget(self.right_rail, 0, QtCore.Qt.AlignBottom)

    # ==========================================================================
    # Viewport subscription
    # ==========================================================================

    def _subscribe(self, viewport: QWidget):
        if self._viewport is viewport:
            return
        self._unsubscribe()
        viewport.installEventFilter(self)
        self._viewport = viewport

    def _unsubscribe(self):
        if self._viewport is not None:
            self._viewport.removeEventFilter(self)
            self._viewport = None

    @contextmanager
    def viewport_subscription(self, viewport: QWidget):
        """Relayout on `viewport` resizes for the duration of the block."""
        self._subscribe(viewport)
        try:
            self.relayout()
            yield self
        finally:
            self._unsubscribe()

    def showEvent(self, event):
        super().showEvent(event)
        self._subscribe(self.window())
        self.relayout()

    def hideEvent(self, event):
        self._unsubscribe()
        super().hideEvent(event)

    def eventFilter(self, obj, event):
        if obj is self._viewport and event.type() == QtCore.QEvent.Resize:
            self.relayout()
        return super().eventFilter(obj, event)

    # ==========================================================================
    # Layout + rendering
    # ==========================================================================

    def relayout(self):
        """Re-measure detent heights against the current viewport and redraw."""
        viewport = self._viewport if self._viewport is not None else self.window()
        self.provider.set_viewport_height(viewport.height())
        layout = self.model.relayout()

        for btn, height in zip(self.buttons, layout.heights):
            btn.setFixedHeight(round(height))

        self._render()

    def set_speed(self, speed: float):
        """Adopt the host's commanded speed (already clamped)."""
        self.speed = speed
        self._render()

    def _render(self):
        frame = self.model.frame(self.speed)
        self.current_frame = frame

        for i, btn in enumerate(self.buttons):
            active = i == frame.active_index
            if btn.property("active") != active:
                btn.setProperty("active", active)
                btn.style().unpolish(btn)
                btn.style().polish(btn)

        for rail in (self.left_rail, self.right_rail):
            rail.set_geometry_data(frame.stack_height, frame.fill_height, frame.ticks)
