from __future__ import annotations

import math
from typing import Tuple

from flaghack.ley.lines import LeyLine, LeyLineKind

Color = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

LEY_COLOR_PURPLE: Color = (140, 64, 242)
LEY_COLOR_PINK: Color = (255, 89, 191)
LEY_COLOR_CYCLE_SPEED = 0.9
PENTAGRAM_COLOR_RED: Color = (255, 38, 13)
PENTAGRAM_COLOR_ORANGE: Color = (255, 140, 0)
PENTAGRAM_COLOR_CYCLE_SPEED = 1.2

LEY_SPARKLE_SPEED = 3.5
LEY_SPARKLE_STRENGTH = 0.35
LEY_SPARKLE_SPATIAL = 0.02
LEY_MIN_ALPHA = 0.05
PENTAGRAM_MIN_ALPHA = 0.12


def lerp_color(c1: Color, c2: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return (
        int(c1[0] + (c2[0] - c1[0]) * t),
        int(c1[1] + (c2[1] - c1[1]) * t),
        int(c1[2] + (c2[2] - c1[2]) * t),
    )


def cycle_color(c1: Color, c2: Color, time: float, speed: float) -> Color:
    """Swing back and forth between two colours."""
    return lerp_color(c1, c2, 0.5 + 0.5 * math.sin(time * speed))


def sparkle(time: float, phase: float) -> float:
    """Multiplier in [1 - strength, 1]; phase offsets neighbouring lines."""
    wave = 0.5 + 0.5 * math.sin(time * LEY_SPARKLE_SPEED + phase)
    return 1.0 - LEY_SPARKLE_STRENGTH + LEY_SPARKLE_STRENGTH * wave


def line_phase(line: LeyLine) -> float:
    mx = (line.a[0] + line.b[0]) * 0.5
    my = (line.a[1] + line.b[1]) * 0.5
    return (mx + my) * LEY_SPARKLE_SPATIAL


def ley_line_alpha(line: LeyLine, time: float) -> float:
    min_alpha = PENTAGRAM_MIN_ALPHA if line.kind is LeyLineKind.PENTAGRAM else LEY_MIN_ALPHA
    alpha = line.intensity * sparkle(time, line_phase(line))
    return max(min_alpha, min(1.0, alpha))


def ley_line_color(line: LeyLine, time: float) -> RGBA:
    if line.kind is LeyLineKind.PENTAGRAM:
        rgb = cycle_color(PENTAGRAM_COLOR_RED, PENTAGRAM_COLOR_ORANGE, time, PENTAGRAM_COLOR_CYCLE_SPEED)
    else:
        rgb = cycle_color(LEY_COLOR_PURPLE, LEY_COLOR_PINK, time, LEY_COLOR_CYCLE_SPEED)
    alpha = int(round(ley_line_alpha(line, time) * 255))
    return (rgb[0], rgb[1], rgb[2], alpha)
