"""
8-bit RGB/RGBA color values.

A color is a list of 3 or 4 channel values in [0, 255]. A missing fourth
channel means the color is fully opaque.
"""

from typing import List, Sequence, Union

from PIL import ImageColor


# =============================================================================
# Constants
# =============================================================================

ALPHA_OPAQUE = 255
ALPHA_TRANSPARENT = 0

COLOR_WHITE = [0xFF, 0xFF, 0xFF]
DARKEST_COLOR = [0x20, 0x21, 0x24]  # Near-black anchor used for dark text

Color = List[int]  # 3 or 4 channels
ColorLike = Sequence  # list, tuple or 1-D numpy array of channels


# =============================================================================
# Alpha Accessors
# =============================================================================

def assert_color(color: ColorLike) -> None:
    assert len(color) in (3, 4), f"color must have 3 or 4 channels: {color!r}"


def color_get_a(color: ColorLike) -> int:
    """Return the alpha channel, or ALPHA_OPAQUE for an RGB color."""
    assert_color(color)
    if len(color) == 3:
        return ALPHA_OPAQUE
    return color[3]


def color_set_a(color: ColorLike, alpha: float) -> Color:
    """Return a new RGBA color with the RGB of |color| and the given alpha."""
    assert_color(color)
    assert ALPHA_TRANSPARENT <= alpha <= ALPHA_OPAQUE, f"alpha out of range: {alpha!r}"
    new_color = list(color[:3])
    new_color.append(alpha)
    return new_color


# =============================================================================
# Conversion
# =============================================================================

def parse_color(value: Union[str, ColorLike]) -> Color:
    """
    Convert a CSS-style color string or a channel sequence to a color list.

    Strings go through Pillow, so "#abc", "#aabbcc", "#aabbccdd",
    "rgb(1, 2, 3)" and named colors are all accepted. Raises ValueError for
    strings Pillow cannot read.
    """
    if isinstance(value, str):
        return list(ImageColor.getrgb(value))
    assert_color(value)
    return [int(c) for c in value]


def color_to_hex(color: ColorLike) -> str:
    """Convert a color to #rrggbb, or #rrggbbaa when it is not opaque."""
    r, g, b = (int(c) for c in color[:3])
    alpha = int(color_get_a(color))
    if alpha == ALPHA_OPAQUE:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{alpha:02x}"
