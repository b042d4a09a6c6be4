"""Normalized (0..1) color entry points over the fixed-function pipeline.

These are the functions the legacy color boundary fronts. They accept three
or four channels like the rest of the drawing code expects; alpha defaults to
opaque.
"""

from __future__ import annotations

from OpenGL.GL import glColor4f, glClearColor


def set_color(r: float, g: float, b: float, a: float = 1.0) -> None:
    glColor4f(r, g, b, a)


def set_background_color(r: float, g: float, b: float, a: float = 1.0) -> None:
    glClearColor(r, g, b, a)
