import pytest

from telegraph.classifier import classify
from telegraph.detents import DETENTS, Detent

FLANK, FULL, STANDARD, AHEAD23, AHEAD13, STOP = range(6)


@pytest.mark.parametrize("speed, expected", [
    (30, FLANK),
    (28, FLANK),
    (25, FULL),
    (20, STANDARD),
    (19, STANDARD),      # midpoint 20/18 -> higher speed
    (18, AHEAD23),
    (14, AHEAD23),       # midpoint 18/10 -> higher speed
    (13.9, AHEAD13),
    (9, AHEAD13),
    (5, AHEAD13),        # midpoint 10/0 -> higher speed
    (4.9, STOP),
    (0, STOP),
])
def test_nearest_detent(speed, expected):
    assert classify(speed, DETENTS) == expected


def test_midpoints_resolve_to_higher_speed():
    speeds = [d.target_speed for d in DETENTS]
    for i in range(len(speeds) - 1):
        midpoint = (speeds[i] + speeds[i + 1]) / 2
        assert classify(midpoint, DETENTS) == i


def test_result_is_at_least_as_close_as_any_other():
    for tenth in range(0, 301):
        speed = tenth / 10
        idx = classify(speed, DETENTS)
        best = abs(speed - DETENTS[idx].target_speed)
        assert all(best <= abs(speed - d.target_speed) for d in DETENTS)


@pytest.mark.parametrize("speed, expected", [(-4, STOP), (45, FLANK)])
def test_out_of_range_speed_still_classifies(speed, expected):
    assert classify(speed, DETENTS) == expected


def test_empty_catalog():
    assert classify(12, []) is None


def test_single_detent():
    assert classify(12, [Detent("stop", ("Stop",), 0, "--stop")]) == 0
