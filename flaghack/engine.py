from __future__ import annotations

"""
Engine entry point: owns the pygame window and the event/update/render loop.

Gameplay state lives in FlagField; the overlay is draw-only.
"""

import logging

import pygame

from flaghack import config
from flaghack.game import FlagField
from flaghack.render.ley_overlay import LeyOverlay

logger = logging.getLogger(__name__)

PLAYER_SPEED = 160.0  # px/s
BG_COLOR = (12, 18, 14)
HUD_BG = (0, 0, 0)
ACCENT = (255, 230, 0)
PLAYER_COLOR = (120, 200, 255)


class Engine:
    def __init__(self, cfg: config.GameConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.screen = pygame.display.set_mode((cfg.view_width, cfg.view_height))
        pygame.display.set_caption("Flaghack")
        self.font = pygame.font.Font(None, 24)
        self.field = FlagField(cfg)
        self.overlay = LeyOverlay(cfg.view_width, cfg.view_height, cfg)
        self.clock = pygame.time.Clock()
        self.time = 0.0
        self.running = True

    # --- input ---

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.field.place_at_player()
            elif event.key == pygame.K_e:
                self.field.pickup_near_player()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            pos = (float(event.pos[0]), float(event.pos[1]))
            if event.button == 1:
                self.field.place(pos)
            elif event.button == 3:
                self.field.pickup(pos)

    def update(self, dt: float) -> None:
        self.time += dt
        keys = pygame.key.get_pressed()
        dx = (keys[pygame.K_RIGHT] or keys[pygame.K_d]) - (keys[pygame.K_LEFT] or keys[pygame.K_a])
        dy = (keys[pygame.K_DOWN] or keys[pygame.K_s]) - (keys[pygame.K_UP] or keys[pygame.K_w])
        if dx or dy:
            step = PLAYER_SPEED * dt
            self.field.move_player(dx * step, dy * step)

    # --- drawing ---

    def render(self) -> None:
        self.screen.fill(BG_COLOR)
        self.overlay.draw(self.screen, self.field.ley_state, self.field.flags, self.time)
        px, py = self.field.player_pos
        pygame.draw.circle(self.screen, PLAYER_COLOR, (int(px), int(py)), 5)

        hud_y = self.cfg.view_height - int(self.cfg.hud_height)
        pygame.draw.rect(self.screen, HUD_BG, pygame.Rect(0, hud_y, self.cfg.view_width, int(self.cfg.hud_height)))
        text = self.font.render(self.field.status_text(), True, ACCENT)
        self.screen.blit(text, (16, hud_y + 14))
        pygame.display.flip()

    def run(self) -> None:
        logger.info(f"Starting with {len(self.field.flags)} flags, {self.field.inventory} in inventory")
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                dt = self.clock.tick(self.cfg.fps) / 1000.0
                self.update(dt)
                self.render()
        finally:
            pygame.quit()
