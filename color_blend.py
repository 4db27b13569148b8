"""
Source-over compositing of possibly translucent colors.
"""

import numpy as np

from color_primitives import (
    ALPHA_OPAQUE, ALPHA_TRANSPARENT, Color, ColorLike, assert_color, color_get_a,
    color_set_a,
)


def alpha_blend(foreground: ColorLike, background: ColorLike, alpha: float) -> Color:
    """
    Blend |foreground| over |background| with the given mix weight.

    Ranges from |background| (alpha == 0) to |foreground| (alpha == 255).
    The alpha channels of both colors are taken into account, so the result
    may be partially transparent.

    Args:
        foreground: RGB or RGBA color
        background: RGB or RGBA color
        alpha: Mix weight in [0, 255]. Fractional weights are allowed.

    Returns:
        New color list. RGBA unless one of the identity cases applies.
    """
    assert_color(foreground)
    assert_color(background)
    assert ALPHA_TRANSPARENT <= alpha <= ALPHA_OPAQUE, f"alpha out of range: {alpha!r}"
    if alpha == ALPHA_TRANSPARENT:
        return list(background)
    if alpha == ALPHA_OPAQUE:
        return list(foreground)

    t_alpha = alpha / 255.0
    f_alpha = color_get_a(foreground)
    b_alpha = color_get_a(background)
    # Result alpha, in [0, 255]
    normalizer = f_alpha * t_alpha + b_alpha * (1.0 - t_alpha)

    if normalizer == ALPHA_TRANSPARENT:
        return [0, 0, 0, 0]

    f_weight = f_alpha * t_alpha / normalizer
    b_weight = b_alpha * (1.0 - t_alpha) / normalizer

    fg = np.asarray(foreground[:3], dtype=np.float64)
    bg = np.asarray(background[:3], dtype=np.float64)
    # Round half up
    rgb = np.floor(fg * f_weight + bg * b_weight + 0.5).astype(int)
    return rgb.tolist() + [int(np.floor(normalizer + 0.5))]


def get_resulting_paint_color(foreground: ColorLike, background: ColorLike) -> Color:
    """Color seen after painting |foreground| once on top of |background|."""
    return alpha_blend(color_set_a(foreground, ALPHA_OPAQUE), background,
                       color_get_a(foreground))
