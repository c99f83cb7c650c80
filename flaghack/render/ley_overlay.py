"""Draw-only pygame layer for ley lines, pentagram centres and flags."""
from typing import Sequence

import pygame

from flaghack import config
from flaghack.ley.colors import (
    PENTAGRAM_COLOR_CYCLE_SPEED,
    PENTAGRAM_COLOR_ORANGE,
    PENTAGRAM_COLOR_RED,
    cycle_color,
    ley_line_color,
)
from flaghack.ley.lines import LeyLineKind, LeyState
from flaghack.state.flags import Flag, Rect, flag_parts

FLAG_POLE_COLOR = (200, 190, 170)
FLAG_CLOTH_COLOR = (255, 230, 0)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(int(round(x)), int(round(y)), max(1, int(round(w))), max(1, int(round(h))))


class LeyOverlay:
    def __init__(self, width: int, height: int, cfg: config.GameConfig) -> None:
        self.width = width
        self.height = height
        self.cfg = cfg
        self.line_width = 2
        self.pentagram_line_width = 3
        # lines are blended onto their own layer so alpha survives onto opaque targets
        self.layer = pygame.Surface((width, height), pygame.SRCALPHA)

    def draw_lines(self, state: LeyState, time: float) -> None:
        for line in state.lines:
            color = ley_line_color(line, time)
            width = self.pentagram_line_width if line.kind is LeyLineKind.PENTAGRAM else self.line_width
            pygame.draw.line(self.layer, color, line.a, line.b, width)

    def draw_pentagram_centers(self, state: LeyState, time: float) -> None:
        radius = max(1, int(round(self.cfg.ley.center_radius)))
        rgb = cycle_color(PENTAGRAM_COLOR_RED, PENTAGRAM_COLOR_ORANGE, time, PENTAGRAM_COLOR_CYCLE_SPEED)
        for cx, cy in state.pentagram_centers:
            center = (int(round(cx)), int(round(cy)))
            pygame.draw.circle(self.layer, (rgb[0], rgb[1], rgb[2], 160), center, radius, 1)

    def draw_flags(self, target: pygame.Surface, flags: Sequence[Flag]) -> None:
        cfg = self.cfg
        for flag in flags:
            pole, cloth = flag_parts(flag.pos, cfg.flag_pole_height, cfg.flag_pole_width, cfg.flag_cloth_size)
            pygame.draw.rect(target, FLAG_POLE_COLOR, _to_pygame_rect(pole))
            pygame.draw.rect(target, FLAG_CLOTH_COLOR, _to_pygame_rect(cloth))

    def draw(self, target: pygame.Surface, state: LeyState, flags: Sequence[Flag], time: float) -> None:
        self.layer.fill((0, 0, 0, 0))
        self.draw_lines(state, time)
        self.draw_pentagram_centers(state, time)
        target.blit(self.layer, (0, 0))
        self.draw_flags(target, flags)

