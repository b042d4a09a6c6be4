from .shade_overlay import ShadeOverlay

__all__ = [
    "ShadeOverlay",
]
