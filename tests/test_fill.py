from telegraph.detents import DETENTS
from telegraph.fill import fill
from telegraph.layout import EMPTY_LAYOUT, resolve


def test_stop_fill_is_half_stop(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    assert fill(5, layout) == 7


def test_flank_fill(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    # everything below Flank plus half of Flank
    assert fill(0, layout) == 25 + 20 + 18 + 10 + 14 + 14


def test_standard_fill(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    assert fill(2, layout) == 18 + 10 + 14 + 10


def test_fill_rises_through_stack(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    fills = [fill(i, layout) for i in range(len(DETENTS))]
    assert fills == sorted(fills, reverse=True)
    assert all(f < layout.stack_height for f in fills)


def test_degenerate_inputs_give_zero(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    assert fill(0, EMPTY_LAYOUT) == 0
    assert fill(None, layout) == 0
    assert fill(6, layout) == 0
    assert fill(-1, layout) == 0
