"""2D full-screen shading overlay drawn after the scene is cleared.

The tint goes through the injected ``set_color`` so it can be written in
0..255 like the rest of the config colors.
"""

from __future__ import annotations

from typing import Callable, Sequence

from config import WIDTH, HEIGHT


class ShadeOverlay:
    """Simple full-screen shade to darken/tint whatever is underneath.

    Drawn in screen space with alpha blending. ``opacity`` may be given as
    0..1 or 0..255; the color boundary sorts out which.
    """

    def __init__(
        self,
        set_color: Callable[..., None],
        opacity: float = 0.3,
        color: Sequence[int] = (0, 0, 0),
    ):
        self.set_color = set_color
        self.opacity = max(0, opacity)
        self.color = tuple(color)[:3]

    def rgba(self) -> tuple:
        r, g, b = self.color
        return (r, g, b, self.opacity)

    def draw(self, width: int = WIDTH, height: int = HEIGHT):
        # Local imports to avoid polluting module scope
        from OpenGL.GL import (
            glPushMatrix,
            glPopMatrix,
            glBegin,
            glEnd,
            glOrtho,
            glLoadIdentity,
            glMatrixMode,
            glDisable,
            glEnable,
            glBlendFunc,
            glVertex2f,
            GL_PROJECTION,
            GL_MODELVIEW,
            GL_BLEND,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
            GL_QUADS,
            GL_TEXTURE_2D,
        )

        # Setup 2D orthographic projection
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, width, height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        # Render state for translucent overlay
        glDisable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        self.set_color(*self.rgba())
        glBegin(GL_QUADS)
        glVertex2f(0, 0)
        glVertex2f(width, 0)
        glVertex2f(width, height)
        glVertex2f(0, height)
        glEnd()

        # Restore state
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
