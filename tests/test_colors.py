"""Tests for ley-line colour and alpha helpers."""

import math

import pytest

from flaghack.ley import colors
from flaghack.ley.lines import LeyLine, LeyLineKind


def make_line(intensity, kind=LeyLineKind.NORMAL):
    return LeyLine(i=0, j=1, a=(0.0, 0.0), b=(10.0, 0.0), intensity=intensity, kind=kind)


class TestLerpColor:
    def test_endpoints(self):
        assert colors.lerp_color((0, 0, 0), (200, 100, 50), 0.0) == (0, 0, 0)
        assert colors.lerp_color((0, 0, 0), (200, 100, 50), 1.0) == (200, 100, 50)

    def test_clamps_t(self):
        assert colors.lerp_color((0, 0, 0), (10, 10, 10), 2.0) == (10, 10, 10)


class TestSparkle:
    def test_range(self):
        for step in range(50):
            value = colors.sparkle(step * 0.1, 0.3)
            assert 1.0 - colors.LEY_SPARKLE_STRENGTH - 1e-9 <= value <= 1.0 + 1e-9


class TestLeyLineColor:
    def test_normal_line_between_purple_and_pink(self):
        r, g, b, _ = colors.ley_line_color(make_line(0.8), 0.0)
        lo = [min(c) for c in zip(colors.LEY_COLOR_PURPLE, colors.LEY_COLOR_PINK)]
        hi = [max(c) for c in zip(colors.LEY_COLOR_PURPLE, colors.LEY_COLOR_PINK)]
        assert lo[0] <= r <= hi[0]
        assert lo[1] <= g <= hi[1]
        assert lo[2] <= b <= hi[2]

    def test_pentagram_line_is_warm(self):
        r, g, b, _ = colors.ley_line_color(make_line(0.8, LeyLineKind.PENTAGRAM), 1.0)
        assert r == 255
        assert b <= colors.PENTAGRAM_COLOR_RED[2]

    def test_cycle_reaches_second_color(self):
        t = (math.pi / 2) / colors.LEY_COLOR_CYCLE_SPEED
        rgb = colors.ley_line_color(make_line(1.0), t)[:3]
        for got, want in zip(rgb, colors.LEY_COLOR_PINK):
            assert abs(got - want) <= 1

    def test_alpha_floor(self):
        assert colors.ley_line_alpha(make_line(0.0), 0.0) == pytest.approx(colors.LEY_MIN_ALPHA)
        pent = make_line(0.0, LeyLineKind.PENTAGRAM)
        assert colors.ley_line_alpha(pent, 0.0) == pytest.approx(colors.PENTAGRAM_MIN_ALPHA)

    def test_alpha_never_exceeds_intensity(self):
        line = make_line(0.5)
        for step in range(20):
            assert colors.ley_line_alpha(line, step * 0.25) <= 0.5 + 1e-9

    def test_alpha_channel_in_byte_range(self):
        _, _, _, alpha = colors.ley_line_color(make_line(1.0), 0.4)
        assert 0 <= alpha <= 255
