import math

import pytest

from telegraph.detents import DETENTS
from telegraph.layout import (
    ClampLength,
    StaticDimensionProvider,
    ViewportDimensionProvider,
    resolve,
)

from conftest import SAMPLE_HEIGHTS


def test_resolve_sample_heights(sample_provider):
    layout = resolve(DETENTS, sample_provider)
    assert layout.heights == tuple(float(h) for h in SAMPLE_HEIGHTS)
    assert layout.stack_height == sum(SAMPLE_HEIGHTS) == 115
    assert layout.baseline_offset == 7


def test_resolve_is_idempotent(sample_provider):
    assert resolve(DETENTS, sample_provider) == resolve(DETENTS, sample_provider)


def test_empty_catalog_is_degenerate(sample_provider):
    layout = resolve([], sample_provider)
    assert layout.heights == ()
    assert layout.stack_height == 0
    assert layout.baseline_offset == 0
    assert layout.is_degenerate


def test_missing_token_counts_as_zero():
    provider = StaticDimensionProvider({"--h-tele-xl": 30, "--h-tele-stop": 20})
    layout = resolve(DETENTS, provider)
    assert layout.heights == (30.0, 0.0, 0.0, 0.0, 0.0, 20.0)
    assert layout.stack_height == 50
    assert layout.baseline_offset == 10


@pytest.mark.parametrize("bad", [None, float("nan"), -5])
def test_unusable_lengths_count_as_zero(bad):
    class Provider:
        def resolve_length(self, token):
            return bad if token == "--h-tele-md" else 10

    layout = resolve(DETENTS, Provider())
    assert layout.heights[3] == 0
    assert layout.stack_height == 50


def test_provider_errors_do_not_fail_layout():
    class Broken:
        def resolve_length(self, token):
            raise ValueError("cannot measure")

    layout = resolve(DETENTS, Broken())
    assert layout.heights == (0.0,) * len(DETENTS)
    assert layout.is_degenerate


def test_length_spec_clamps():
    length = ClampLength(min_px=40, vh=5, max_px=60)
    assert length.to_pixels(400) == 40    # 20 -> min
    assert length.to_pixels(1000) == 50
    assert length.to_pixels(2000) == 60   # 100 -> max


def test_viewport_provider_follows_resize():
    tokens = {d.height_token: ClampLength(10, 5, 100) for d in DETENTS}
    provider = ViewportDimensionProvider(tokens, viewport_height=800)
    small = resolve(DETENTS, provider)
    assert small.heights == (40.0,) * 6

    provider.set_viewport_height(1200)
    large = resolve(DETENTS, provider)
    assert large.heights == (60.0,) * 6
    assert large.stack_height == 360
    assert large.baseline_offset == 30


def test_viewport_provider_unknown_token():
    provider = ViewportDimensionProvider({}, viewport_height=800)
    assert provider.resolve_length("--nope") is None
    assert math.isclose(resolve(DETENTS, provider).stack_height, 0)


def test_viewport_provider_rounds_to_whole_pixels():
    provider = ViewportDimensionProvider({"--h-tele-md": ClampLength(10, 5, 100)}, viewport_height=813)
    assert provider.resolve_length("--h-tele-md") == 41.0
