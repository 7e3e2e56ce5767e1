"""
Main window for the ship bridge status dashboard.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QProgressBar,
    QSlider,
    QGroupBox,
)

from bridge.channel import DESIRED_SPEED, SET_CONDITION_1, TOTAL_FUEL_LOAD, ValueChannel
from bridge.speed_command import MAX_SPEED, MIN_SPEED, SpeedCommand, coerce_fuel_load
from ui.canvases import ELECT_PROFILE, FUEL_PROFILE, ProfilePlotCanvas
from ui.styles import ACCENT_BLUE, ACCENT_PINK, DARK_STYLESHEET
from ui.telegraph import TelegraphWidget

logger = logging.getLogger(__name__)

# Static platform figures shown on the cards
MISSION_PROFILE = [
    ("Propulsion", "Trail Shaft"),
    ("Fuel", "100%"),
    ("Range", "200 nmi"),
    ("Endurance", "300 hrs"),
]
AUX_POWER_KW, AUX_LOAD = 420, 65
ARMAMENT_POWER_KW, ARMAMENT_LOAD = 310, 42
TOTAL_POWER_KW = 1.21
ENERGY_CONSUMED_KWH = 88


def format_speed(speed: float) -> str:
    return f"{speed:g}"


def entry_shows_speed(text: str, speed: float) -> bool:
    """
    True when the entry text, read literally, is `speed`.

    An empty entry reads as 0. Out-of-range or non-numeric text does not
    match, so the entry gets rewritten to the clamped speed.
    """
    text = text.strip()
    if text == "":
        return speed == MIN_SPEED
    try:
        return float(text) == speed
    except ValueError:
        return False


def format_fuel_load(load: Optional[float]) -> str:
    return "—" if load is None else f"{load:g}"


def _label(text: str, role: Optional[str] = None) -> QLabel:
    label = QLabel(text)
    if role:
        label.setProperty("role", role)
    return label


class MainWindow(QMainWindow):
    """
    Bridge dashboard window.

    Displays:
    - Mission profile stat cards (live speed)
    - Aux / armament power cards and the energy summary (live fuel load)
    - Engine order telegraph with rail gauges
    - Elect and fuel trend plots
    - Commanded speed controls
    """

    def __init__(self, speed_command: SpeedCommand, channel: ValueChannel, ship_name: str = "DDG 115"):
        super().__init__()

        self.speed_command = speed_command
        self.channel = channel
        self.ship_name = ship_name
        self.total_fuel_load: Optional[float] = None

        self.setWindowTitle(f"{ship_name} Bridge Dashboard")
        self.resize(1400, 900)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(12, 12, 12, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addLayout(self._build_header())
        root_layout.addWidget(self._build_mission_profile())

        # Middle band: left / telegraph / right
        columns = QHBoxLayout()
        columns.setSpacing(10)
        columns.addLayout(self._build_left_column(), 3)
        columns.addLayout(self._build_middle_column(), 3)
        columns.addLayout(self._build_right_column(), 3)
        root_layout.addLayout(columns, 1)

        root_layout.addWidget(self._build_controls())
        root_layout.addWidget(self._build_footer())

        self.setStyleSheet(DARK_STYLESHEET)

        # Host wiring
        self.telegraph.speed_requested.connect(self.speed_command.set_speed)
        self.speed_command.speed_changed.connect(self.render_speed)
        self.speed_command.speed_changed.connect(self._push_speed)

        self._unsubscribers: List[Callable[[], None]] = [
            self.channel.on_value(DESIRED_SPEED, self.speed_command.set_from_remote),
            self.channel.on_value(TOTAL_FUEL_LOAD, self.update_fuel_load),
        ]

        self.render_speed(self.speed_command.speed)

    # ==========================================================================
    # Layout
    # ==========================================================================

    def _build_header(self):
        header = QVBoxLayout()
        header.setSpacing(0)

        title = QLabel(self.ship_name)
        title.setStyleSheet("font-size: 22pt; font-weight: bold;")
        subtitle = _label("Real-time platform status", "stat-title")

        header.addWidget(title)
        header.addWidget(subtitle)
        return header

    def _stat(self, title: str, value: str):
        """Stat card cell; returns (widget, value label)."""
        cell = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)
        cell.setLayout(layout)

        value_label = _label(value, "stat-value")
        layout.addWidget(_label(title, "stat-title"))
        layout.addWidget(value_label)
        return cell, value_label

    def _build_mission_profile(self):
        group = QGroupBox("Mission Profile")
        grid = QGridLayout()
        group.setLayout(grid)

        cell, self.speed_stat_label = self._stat("Speed", "-- knts")
        grid.addWidget(cell, 0, 0)
        for col, (title, value) in enumerate(MISSION_PROFILE, start=1):
            cell, _ = self._stat(title, value)
            grid.addWidget(cell, 0, col)

        return group

    def _power_card(self, title: str, power_kw: int, load: int, accent: str):
        group = QGroupBox(title)
        layout = QVBoxLayout()
        group.setLayout(layout)

        row = QHBoxLayout()
        row.addWidget(_label("Total Power", "stat-title"))
        row.addStretch()
        row.addWidget(QLabel(f"{power_kw} kW"))
        layout.addLayout(row)

        bar = QProgressBar()
        bar.setRange(0, 100)
        bar.setValue(load)
        bar.setTextVisible(False)
        bar.setProperty("accent", accent)
        layout.addWidget(bar)

        layout.addWidget(_label(f"Load {load}%", "dim"))
        return group

    def _build_left_column(self):
        """Build left column: power cards + energy summary."""
        left_col = QVBoxLayout()
        left_col.setSpacing(10)

        left_col.addWidget(self._power_card("Aux Systems", AUX_POWER_KW, AUX_LOAD, "primary"))
        left_col.addWidget(
            self._power_card("Armament Systems", ARMAMENT_POWER_KW, ARMAMENT_LOAD, "secondary")
        )

        energy_group = QGroupBox("Energy Summary")
        energy_layout = QHBoxLayout()
        energy_group.setLayout(energy_layout)

        fuel_cell, self.fuel_load_label = self._stat("Fuel Load", "— kg")
        fuel_cell.layout().addWidget(_label("Live from CST", "dim"))
        power_cell, _ = self._stat("Total Power", f"{TOTAL_POWER_KW} kW")
        energy_cell, _ = self._stat("Energy Consumed", f"{ENERGY_CONSUMED_KWH} kWh")

        energy_layout.addWidget(fuel_cell)
        energy_layout.addWidget(power_cell)
        energy_layout.addWidget(energy_cell)

        left_col.addWidget(energy_group)
        left_col.addStretch()
        return left_col

    def _build_middle_column(self):
        """Build middle column: telegraph + rails."""
        mid_col = QVBoxLayout()
        self.telegraph = TelegraphWidget(self)
        mid_col.addWidget(self.telegraph, 0, QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop)
        mid_col.addStretch()
        return mid_col

    def _plot_card(self, title: str, unit: str, canvas: ProfilePlotCanvas):
        group = QGroupBox(title)
        layout = QVBoxLayout()
        group.setLayout(layout)
        layout.addWidget(_label(unit, "dim"), 0, QtCore.Qt.AlignRight)
        layout.addWidget(canvas)
        return group

    def _build_right_column(self):
        """Build right column: trend plots."""
        right_col = QVBoxLayout()
        right_col.setSpacing(10)

        self.elect_canvas = ProfilePlotCanvas(ELECT_PROFILE, ACCENT_BLUE, self)
        self.fuel_canvas = ProfilePlotCanvas(FUEL_PROFILE, ACCENT_PINK, self)

        right_col.addWidget(self._plot_card("Elect Plot", "kW", self.elect_canvas))
        right_col.addWidget(self._plot_card("Fuel Plot", "%", self.fuel_canvas))
        right_col.addStretch()
        return right_col

    def _build_controls(self):
        group = QGroupBox("Commanded Speed")
        layout = QVBoxLayout()
        group.setLayout(layout)

        # Manual entry
        entry_row = QHBoxLayout()
        entry_row.addWidget(_label("Enter Speed:", "stat-title"))
        self.speed_input = QLineEdit()
        self.speed_input.setFixedWidth(80)
        self.speed_input.textEdited.connect(self._on_entry_edited)
        entry_row.addWidget(self.speed_input)
        entry_row.addStretch()
        layout.addLayout(entry_row)

        # Slider
        self.speed_slider = QSlider(QtCore.Qt.Horizontal)
        self.speed_slider.setRange(int(MIN_SPEED), int(MAX_SPEED))
        self.speed_slider.setMaximumWidth(380)
        self.speed_slider.valueChanged.connect(self._on_slider_changed)
        layout.addWidget(self.speed_slider)

        marks = QHBoxLayout()
        for mark in ("0", "10", "20", "30"):
            marks.addWidget(_label(mark, "dim"))
            marks.addStretch()
        marks_box = QWidget()
        marks_box.setMaximumWidth(380)
        marks_box.setLayout(marks)
        layout.addWidget(marks_box)

        # Operation call
        condition_btn = QPushButton("Set Condition 1")
        condition_btn.setFixedWidth(160)
        condition_btn.clicked.connect(lambda: self.channel.call_operation(SET_CONDITION_1))
        layout.addWidget(condition_btn)

        value_row = QHBoxLayout()
        value_row.addWidget(_label("Value", "stat-title"))
        self.speed_value_label = QLabel("-- knts")
        value_row.addWidget(self.speed_value_label)
        value_row.addStretch()
        layout.addLayout(value_row)

        return group

    def _build_footer(self):
        footer = _label(f"© {datetime.now().year} Systems Dashboard", "dim")
        footer.setAlignment(QtCore.Qt.AlignCenter)
        return footer

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def render_speed(self, speed: float):
        """Push the commanded speed to every view of it."""
        text = format_speed(speed)
        self.speed_stat_label.setText(f"{text} knts")
        self.speed_value_label.setText(f"{text} knts")

        self._sync_entry(speed)

        self.speed_slider.blockSignals(True)
        self.speed_slider.setValue(round(speed))
        self.speed_slider.blockSignals(False)

        self.telegraph.set_speed(speed)

    def update_fuel_load(self, value):
        """Handle totalFuelLoad pushed by CST."""
        self.total_fuel_load = coerce_fuel_load(value)
        logger.debug(f"totalFuelLoad -> {self.total_fuel_load}")
        self.fuel_load_label.setText(f"{format_fuel_load(self.total_fuel_load)} kg")

    def _sync_entry(self, speed: float):
        """Show the adopted speed in the entry unless its text already reads as it."""
        if not entry_shows_speed(self.speed_input.text(), speed):
            self.speed_input.setText(format_speed(speed))

    def _on_entry_edited(self, text: str):
        # Clamped or rejected input leaves the speed unchanged; still correct the entry
        if not self.speed_command.set_from_text(text):
            self._sync_entry(self.speed_command.speed)

    def _on_slider_changed(self, value: int):
        self.speed_command.set_speed(value)

    def _push_speed(self, speed: float):
        self.channel.set_value(DESIRED_SPEED, speed)

    def closeEvent(self, event):
        for off in self._unsubscribers:
            off()
        self._unsubscribers = []
        super().closeEvent(event)
