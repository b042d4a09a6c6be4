"""Legacy color boundary: 0..255 callers in front of 0..1 color entry points.

Older call sites pass colors as bytes (``set_color(255, 128, 0)``) while the
GL entry points expect normalized floats. Rather than patching the library
namespace, the boundary is a wrapper value built once at start-up and handed
to whoever draws:

    from compat import install_color_boundary

    boundary = install_color_boundary()
    boundary.set_background_color(179, 204, 255)
    boundary.set_color([255, 0, 0])

Each call is classified once into an ``Aggregate`` (a single list/tuple/array
argument) or ``Positional`` shape, the first four channel slots are rescaled
and the original is invoked with plain positional arguments.

A channel is rescaled only when it is numeric and greater than 1. Values in
0..1 are treated as already normalized, so a legacy ``1`` is indistinguishable
from ``1.0`` and passes through unchanged.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

import config

LEGACY_CHANNEL_MAX = 255
MAX_CHANNELS = 4  # r, g, b, a


# ---------------------------------------------------------------------------
# Per-channel conversion
# ---------------------------------------------------------------------------
def is_numeric(value: Any) -> bool:
    """Real-valued scalars, including Decimal and 0-d numpy arrays."""
    if isinstance(value, np.ndarray):
        return value.ndim == 0 and value.dtype.kind in "biuf"
    return isinstance(value, numbers.Number) and not isinstance(value, complex)


def convert_channel(value: Any) -> Any:
    """Return ``value / 255`` for numeric values above 1, else ``value``."""
    if is_numeric(value) and value > 1:
        return value / LEGACY_CHANNEL_MAX
    return value


# ---------------------------------------------------------------------------
# Call shapes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Aggregate:
    """All channels bundled in one ordered collection (already capped to 4)."""

    values: Tuple[Any, ...]


@dataclass(frozen=True)
class Positional:
    """Channels supplied as separate arguments; extras ride along after slot 4."""

    args: Tuple[Any, ...]


CallShape = Union[Aggregate, Positional]


def is_aggregate(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


def classify_call(args: Tuple[Any, ...]) -> CallShape:
    if len(args) == 1 and is_aggregate(args[0]):
        # Copy out; nothing downstream may write into the caller's collection
        values = args[0]
        count = min(len(values), MAX_CHANNELS)
        return Aggregate(tuple(values[i] for i in range(count)))
    return Positional(tuple(args))


def translate(shape: CallShape) -> Tuple[Any, ...]:
    """Convert the channel slots of ``shape`` into forwarding arguments."""
    if isinstance(shape, Aggregate):
        return tuple(convert_channel(v) for v in shape.values)
    args = shape.args
    head = tuple(convert_channel(v) for v in args[:MAX_CHANNELS])
    return head + tuple(args[MAX_CHANNELS:])


# ---------------------------------------------------------------------------
# Wrapper value
# ---------------------------------------------------------------------------
class LegacyColorCall:
    """Callable that accepts legacy colors and forwards normalized ones.

    The wrapped function is captured once at construction and never
    replaced. Return values and exceptions of the original pass through
    untouched.
    """

    __slots__ = ("_original", "name", "debug")

    def __init__(
        self,
        original: Callable[..., Any],
        *,
        name: Optional[str] = None,
        debug: Optional[bool] = None,
    ):
        self._original = original
        self.name = name or getattr(original, "__name__", repr(original))
        self.debug = debug  # None follows config.COLOR_BOUNDARY_DEBUG per call

    @property
    def debugging(self) -> bool:
        if self.debug is None:
            return bool(config.COLOR_BOUNDARY_DEBUG)
        return self.debug

    @property
    def original(self) -> Callable[..., Any]:
        return self._original

    def __call__(self, *args, **kwargs):
        forwarded = translate(classify_call(args))
        if self.debugging:
            print(f"[ColorBoundary] {self.name}: {args} -> {forwarded}")
        return self._original(*forwarded, **kwargs)

    def __repr__(self) -> str:
        return f"LegacyColorCall({self.name})"


def legacy_color(original: Callable[..., Any], **kwargs) -> LegacyColorCall:
    """Wrap ``original`` so it accepts 0..255 colors.

    Usable as a decorator. Wrapping an existing ``LegacyColorCall`` returns it
    unchanged; a second layer would rescale values twice.
    """
    if isinstance(original, LegacyColorCall):
        return original
    return LegacyColorCall(original, **kwargs)


# ---------------------------------------------------------------------------
# Boundary bundle
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ColorBoundary:
    """The two wrapped entry points, passed explicitly to drawing code."""

    set_color: LegacyColorCall
    set_background_color: LegacyColorCall


def install_color_boundary(
    set_color: Optional[Callable[..., Any]] = None,
    set_background_color: Optional[Callable[..., Any]] = None,
    *,
    debug: Optional[bool] = None,
) -> ColorBoundary:
    """Build the boundary once at start-up.

    Defaults wrap the GL-backed functions in ``core.gl_color``; pass other
    callables to front something else (tests use recorders).
    """
    if set_color is None or set_background_color is None:
        # Local import so the boundary stays usable without a GL context
        from core import gl_color

        if set_color is None:
            set_color = gl_color.set_color
        if set_background_color is None:
            set_background_color = gl_color.set_background_color

    boundary = ColorBoundary(
        set_color=legacy_color(set_color, name="set_color", debug=debug),
        set_background_color=legacy_color(
            set_background_color, name="set_background_color", debug=debug
        ),
    )
    if boundary.set_color.debugging:
        print(
            f"[ColorBoundary] Installed over {boundary.set_color.original!r}, "
            f"{boundary.set_background_color.original!r}"
        )
    return boundary
