from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from flaghack import config
from flaghack.ley.lines import LeyState, compute_ley_state, pentagram_at
from flaghack.state import flags as flag_ops
from flaghack.state.flags import Flag, Rect, Vec2

logger = logging.getLogger(__name__)


class FlagField:
    """
    Owns the flags on the ground, the player's flag inventory and the
    derived ley state.

    Every mutation recomputes ``ley_state`` from scratch before returning, so
    callers can read it at any time without worrying about staleness.
    """

    def __init__(self, cfg: config.GameConfig, flags: Optional[List[Flag]] = None) -> None:
        self.cfg = cfg
        self.field: Rect = flag_ops.field_rect(cfg.view_width, cfg.view_height, cfg.hud_height)
        if flags is None:
            flags = flag_ops.spawn_initial_flags(cfg.flag_count_start, self.field, cfg.flag_spawn_padding)
        self.flags: List[Flag] = list(flags)
        self.inventory: int = cfg.starting_flag_inventory
        fx, fy, fw, fh = self.field
        self.player_pos: Vec2 = (fx + fw * 0.5, fy + fh * 0.5)
        self.ley_state: LeyState = LeyState()
        self.recompute()

    # --- ley state ---

    def recompute(self) -> LeyState:
        ley = self.cfg.ley
        self.ley_state = compute_ley_state(
            flag_ops.flag_positions(self.flags),
            ley.max_distance,
            radius_tolerance=ley.radius_tolerance,
            angle_tolerance=ley.angle_tolerance,
        )
        return self.ley_state

    def active_pentagram(self) -> Optional[Vec2]:
        """Centre of the pentagram the player stands in, if any."""
        return pentagram_at(self.ley_state, self.player_pos, self.cfg.ley.center_radius)

    # --- player ---

    def move_player(self, dx: float, dy: float) -> None:
        fx, fy, fw, fh = self.field
        x = min(max(self.player_pos[0] + dx, fx), fx + fw)
        y = min(max(self.player_pos[1] + dy, fy), fy + fh)
        self.player_pos = (x, y)

    # --- flag actions ---

    def place(self, origin: Vec2, offset: Tuple[float, float] = (0.0, 0.0)) -> bool:
        placed, self.inventory = flag_ops.try_place_flag(self.flags, self.inventory, origin, offset, self.field)
        if not placed:
            logger.debug("No flags left to place.")
            return False
        logger.info(f"Placed flag at {self.flags[-1].pos}; {self.inventory} left in inventory")
        self.recompute()
        return True

    def place_at_player(self) -> bool:
        return self.place(self.player_pos, self.cfg.flag_place_offset)

    def pickup(self, origin: Vec2, radius: Optional[float] = None) -> bool:
        if radius is None:
            radius = self.cfg.flag_interact_radius
        if not flag_ops.try_pickup_flag(self.flags, origin, radius):
            return False
        self.inventory += 1
        logger.info(f"Picked up flag near {origin}; {self.inventory} in inventory")
        self.recompute()
        return True

    def pickup_near_player(self) -> bool:
        return self.pickup(self.player_pos)

    def status_text(self) -> str:
        text = (
            f"Flags: {self.inventory}  Ground: {len(self.flags)}  "
            f"Lines: {len(self.ley_state.lines)}  Pentagrams: {len(self.ley_state.pentagram_centers)}"
        )
        if self.active_pentagram() is not None:
            text += "  * inside pentagram *"
        return text
