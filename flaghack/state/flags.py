"""Flags planted on the field and the helpers that move them around."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

Vec2 = Tuple[float, float]
Rect = Tuple[float, float, float, float]  # x, y, w, h


@dataclass(frozen=True)
class Flag:
    pos: Vec2


def field_rect(screen_w: float, screen_h: float, hud_height: float) -> Rect:
    """Playable area above the HUD strip."""
    return (0.0, 0.0, float(screen_w), max(0.0, float(screen_h) - hud_height))


def spawn_initial_flags(count: int, field: Rect, padding: float) -> List[Flag]:
    """Lay out count flags on a near-square grid, centred in their cells."""
    if count <= 0:
        return []

    columns = int(math.ceil(math.sqrt(count)))
    rows = (count + columns - 1) // columns

    fx, fy, fw, fh = field
    usable_w = max(1.0, fw - padding * 2.0)
    usable_h = max(1.0, fh - padding * 2.0)
    cell_w = usable_w / columns
    cell_h = usable_h / rows

    flags: List[Flag] = []
    for i in range(count):
        col = i % columns
        row = i // columns
        x = fx + padding + cell_w * (col + 0.5)
        y = fy + padding + cell_h * (row + 0.5)
        flags.append(Flag(pos=(x, y)))
    return flags


def nearest_flag_index(flags: Sequence[Flag], origin: Vec2, radius: float) -> Optional[int]:
    best_index = None
    best_dist = radius * radius
    ox, oy = origin
    for i, flag in enumerate(flags):
        dx = flag.pos[0] - ox
        dy = flag.pos[1] - oy
        dist_sq = dx * dx + dy * dy
        if dist_sq <= best_dist:
            best_dist = dist_sq
            best_index = i
    return best_index


def try_pickup_flag(flags: List[Flag], origin: Vec2, radius: float) -> bool:
    """
    Remove the nearest flag within radius.

    Uses swap-remove, so the last flag takes the picked flag's slot; any
    ley state computed before the pickup is stale afterwards.
    """
    index = nearest_flag_index(flags, origin, radius)
    if index is None:
        return False
    flags[index] = flags[-1]
    flags.pop()
    return True


def try_place_flag(
    flags: List[Flag],
    inventory: int,
    origin: Vec2,
    offset: Vec2,
    field: Rect,
) -> Tuple[bool, int]:
    """Plant a flag at origin + offset (clamped to the field). Returns (placed, inventory)."""
    if inventory <= 0:
        return False, inventory

    fx, fy, fw, fh = field
    x = min(max(origin[0] + offset[0], fx), fx + fw)
    y = min(max(origin[1] + offset[1], fy), fy + fh)
    flags.append(Flag(pos=(x, y)))
    return True, inventory - 1


def flag_parts(base: Vec2, pole_height: float, pole_width: float, cloth_size: Vec2) -> Tuple[Rect, Rect]:
    """Pole and cloth rectangles for a flag standing at base; cloth hangs right of the pole top."""
    pole = (base[0] - pole_width * 0.5, base[1] - pole_height, pole_width, pole_height)
    cloth = (pole[0] + pole[2], pole[1], cloth_size[0], cloth_size[1])
    return pole, cloth


def flag_positions(flags: Sequence[Flag]) -> Tuple[Vec2, ...]:
    """Immutable snapshot of positions, index-aligned with flags."""
    return tuple(flag.pos for flag in flags)
