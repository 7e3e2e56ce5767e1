import pytest

pytest.importorskip("PyQt5.QtWidgets")

from bridge.channel import DESIRED_SPEED, SET_CONDITION_1, TOTAL_FUEL_LOAD, ValueChannel
from bridge.speed_command import SpeedCommand
from ui.main_window import MainWindow, format_fuel_load

pytestmark = pytest.mark.usefixtures("qapp")


class RecordingSender:
    def __init__(self):
        self.values = []
        self.operations = []

    def send_value(self, name, value):
        self.values.append((name, value))

    def send_operation(self, name):
        self.operations.append(name)


@pytest.fixture
def dashboard():
    sender = RecordingSender()
    channel = ValueChannel(sender)
    command = SpeedCommand()
    window = MainWindow(command, channel, ship_name="DDG 115")
    yield window, command, channel, sender
    window.close()


def test_initial_render(dashboard):
    window, command, _channel, _sender = dashboard
    assert command.speed == 30
    assert window.speed_stat_label.text() == "30 knts"
    assert window.speed_value_label.text() == "30 knts"
    assert window.speed_slider.value() == 30
    assert window.speed_input.text() == "30"
    assert window.fuel_load_label.text() == "— kg"


def test_remote_speed_updates_views_and_echoes_once(dashboard):
    window, command, channel, sender = dashboard

    channel.publish(DESIRED_SPEED, 18)
    assert command.speed == 18
    assert window.speed_value_label.text() == "18 knts"
    assert window.telegraph.current_frame.active_index == 3
    assert sender.values == [(DESIRED_SPEED, 18)]

    # Echo of the same value from CST is not re-sent
    channel.publish(DESIRED_SPEED, 18)
    assert sender.values == [(DESIRED_SPEED, 18)]


def test_non_numeric_remote_speed_is_ignored(dashboard):
    window, command, channel, sender = dashboard
    channel.publish(DESIRED_SPEED, "fast")
    assert command.speed == 30
    assert sender.values == []


def test_fuel_load_from_cst(dashboard):
    window, _command, channel, _sender = dashboard
    channel.publish(TOTAL_FUEL_LOAD, 5400)
    assert window.fuel_load_label.text() == "5400 kg"
    channel.publish(TOTAL_FUEL_LOAD, None)
    assert window.fuel_load_label.text() == "— kg"


def test_slider_and_entry_drive_speed(dashboard):
    window, command, _channel, _sender = dashboard
    window.speed_slider.setValue(12)
    assert command.speed == 12

    window.speed_input.textEdited.emit("45")
    assert command.speed == 30

    window.speed_input.textEdited.emit("")
    assert command.speed == 0


def test_detent_press_goes_through_host(dashboard):
    window, command, _channel, sender = dashboard
    window.telegraph.buttons[1].click()
    assert command.speed == 25
    assert sender.values[-1] == (DESIRED_SPEED, 25)


def test_close_unsubscribes(dashboard):
    window, command, channel, _sender = dashboard
    window.close()
    assert channel.subscriber_count(DESIRED_SPEED) == 0
    channel.publish(DESIRED_SPEED, 5)
    assert command.speed == 30


def test_set_condition_button(dashboard):
    window, _command, _channel, sender = dashboard
    from PyQt5.QtWidgets import QPushButton
    button = next(b for b in window.findChildren(QPushButton) if b.text() == "Set Condition 1")
    button.click()
    assert sender.operations == [SET_CONDITION_1]


def test_format_fuel_load():
    assert format_fuel_load(None) == "—"
    assert format_fuel_load(12.5) == "12.5"


def test_out_of_range_entry_shows_clamped_speed(dashboard):
    window, command, _channel, _sender = dashboard
    window.speed_input.setText("45")
    window.speed_input.textEdited.emit("45")
    assert command.speed == 30
    assert window.speed_input.text() == "30"

    window.speed_input.setText("12")
    window.speed_input.textEdited.emit("12")
    window.speed_input.setText("-4")
    window.speed_input.textEdited.emit("-4")
    assert command.speed == 0
    assert window.speed_input.text() == "0"


def test_rejected_entry_text_is_replaced(dashboard):
    window, command, _channel, _sender = dashboard
    window.speed_input.setText("fast")
    window.speed_input.textEdited.emit("fast")
    assert command.speed == 30
    assert window.speed_input.text() == "30"


def test_entry_text_matching_speed_is_kept(dashboard):
    window, command, _channel, _sender = dashboard
    window.speed_input.setText("7.50")
    window.speed_input.textEdited.emit("7.50")
    assert command.speed == 7.5
    assert window.speed_input.text() == "7.50"

    window.speed_input.setText("")
    window.speed_input.textEdited.emit("")
    assert command.speed == 0
    assert window.speed_input.text() == ""


@pytest.mark.parametrize("text, speed, expected", [
    ("30", 30, True),
    ("45", 30, False),
    ("", 0, True),
    ("", 5, False),
    ("abc", 0, False),
])
def test_entry_shows_speed(text, speed, expected):
    from ui.main_window import entry_shows_speed
    assert entry_shows_speed(text, speed) is expected
