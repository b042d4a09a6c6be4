from .color_boundary import (
    Aggregate,
    ColorBoundary,
    LegacyColorCall,
    Positional,
    classify_call,
    convert_channel,
    install_color_boundary,
    legacy_color,
    translate,
)

__all__ = [
    "Aggregate",
    "ColorBoundary",
    "LegacyColorCall",
    "Positional",
    "classify_call",
    "convert_channel",
    "install_color_boundary",
    "legacy_color",
    "translate",
]
