import pytest

from telegraph.detents import DETENTS, Detent, detent_title, validate_detents


def test_catalog_order_and_speeds():
    assert [d.id for d in DETENTS] == ["flank", "full", "standard", "ahead23", "ahead13", "stop"]
    assert [d.target_speed for d in DETENTS] == [28, 25, 20, 18, 10, 0]


def test_catalog_ends_on_single_stop():
    stops = [d for d in DETENTS if d.target_speed == 0]
    assert stops == [DETENTS[-1]]


def test_height_tokens_are_distinct():
    tokens = [d.height_token for d in DETENTS]
    assert len(set(tokens)) == len(tokens)


def test_detents_are_immutable():
    with pytest.raises(AttributeError):
        DETENTS[0].target_speed = 30


def test_title_joins_label_lines():
    assert detent_title(DETENTS[1]) == "Ahead Full (25 kts)"
    assert detent_title(DETENTS[-1]) == "Stop (0 kts)"


def test_validate_rejects_non_decreasing_speeds():
    bad = (
        Detent("a", ("A",), 10, "--a"),
        Detent("b", ("B",), 10, "--b"),
        Detent("stop", ("Stop",), 0, "--stop"),
    )
    with pytest.raises(ValueError, match="strictly decrease"):
        validate_detents(bad)


def test_validate_requires_stop_last():
    bad = (
        Detent("a", ("A",), 10, "--a"),
        Detent("b", ("B",), 5, "--b"),
    )
    with pytest.raises(ValueError, match="zero-speed"):
        validate_detents(bad)


def test_validate_rejects_duplicate_ids():
    bad = (
        Detent("a", ("A",), 10, "--a"),
        Detent("a", ("Stop",), 0, "--stop"),
    )
    with pytest.raises(ValueError, match="ids"):
        validate_detents(bad)
