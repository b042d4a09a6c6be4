"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window, GL state, main loop.
- ColorBoundary: legacy 0..255 color entry points, built once here and
  passed to everything that draws.
- Overlay: full-screen shade drawn after the clear.
"""

from __future__ import annotations

from typing import Optional

import pygame
from OpenGL.GL import glClear, GL_COLOR_BUFFER_BIT

from config import *
from compat.color_boundary import ColorBoundary, install_color_boundary
from ui.shade_overlay import ShadeOverlay


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, boundary: Optional[ColorBoundary] = None):
        pygame.init()
        pygame.display.set_caption(TITLE)
        # Build flags once and pass an explicit vsync value. Some older pygame
        # builds don't accept the vsync kwarg, so fall back to the older call
        # signature.
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame or vsync unavailable on this driver
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # Needs the GL context above; installed exactly once per engine
        self.colors = boundary or install_color_boundary()

        self.colors.set_background_color(*BACKGROUND_COLOR)

        self.shade = ShadeOverlay(
            self.colors.set_color, opacity=SHADE_OPACITY, color=SHADE_COLOR
        )

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.colors.set_background_color(BACKGROUND_COLOR)
        glClear(GL_COLOR_BUFFER_BIT)
        self.shade.draw(WIDTH, HEIGHT)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # With vsync the swap paces us; keep FPS as a cap for drivers
            # that ignore it.
            if not VSYNC:
                self.clock.tick()
            else:
                self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            self.render()
        pygame.quit()
