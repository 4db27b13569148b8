"""
Readable text colors.

Picks how far to blend a foreground color toward black or white so it
reaches a minimum WCAG contrast ratio against an opaque background.
Two stages: paint the colors onto the background → binary search the
blend weight.
"""

import math

import structlog

from color_blend import alpha_blend, get_resulting_paint_color
from color_luminance import (
    MIN_READABLE_CONTRAST_RATIO, contrast_ratio_from_luminance,
    get_contrast_ratio, is_dark, relative_luminance,
)
from color_primitives import (
    ALPHA_OPAQUE, ALPHA_TRANSPARENT, COLOR_WHITE, DARKEST_COLOR, Color,
    ColorLike, color_get_a,
)

log = structlog.get_logger()


# =============================================================================
# Constants
# =============================================================================

# Search tolerance used by the public entry points. The returned alpha is
# within this many steps of the smallest one that works.
CLOSE_ENOUGH_ALPHA_DELTA = 0x04


# =============================================================================
# Blend Search
# =============================================================================

def find_blend_value_for_contrast_ratio(source: ColorLike, target: ColorLike, base: ColorLike,
                                        contrast_ratio: float,
                                        alpha_error_tolerance: int = 0) -> int:
    """
    Find the smallest alpha such that blending |target| onto |source| gives a
    color with at least |contrast_ratio| against |base|.

    Returns ALPHA_OPAQUE if no alpha reaches the ratio. All three colors must
    be opaque. |alpha_error_tolerance| of 0 gives the exact minimum; a
    positive value (4 is recommended) ends the search early with an alpha
    that is close enough.

    Midpoints are not truncated, so |high| narrows on a fractional blend
    weight while |low| stays an integer no greater than the minimum. The
    best weight found is rounded up to the returned alpha.
    """
    assert color_get_a(source) == ALPHA_OPAQUE, "source must be opaque"
    assert color_get_a(target) == ALPHA_OPAQUE, "target must be opaque"
    assert color_get_a(base) == ALPHA_OPAQUE, "base must be opaque"
    base_luminance = relative_luminance(base)

    # Inclusive lower bound, exclusive upper bound
    low = ALPHA_TRANSPARENT
    high = ALPHA_OPAQUE + 1
    best = ALPHA_OPAQUE
    found = False
    while low + alpha_error_tolerance < high:
        if high - low <= 1:
            # Only |low| is left as an integer candidate
            alpha = low
        else:
            alpha = min((low + high) / 2, ALPHA_OPAQUE)
        blended = alpha_blend(target, source, alpha)
        contrast = contrast_ratio_from_luminance(relative_luminance(blended),
                                                 base_luminance)
        if contrast >= contrast_ratio:
            best = alpha
            found = True
            high = alpha
        else:
            low = math.floor(alpha) + 1

    best = math.ceil(best)
    if found:
        log.debug("contrast_blend_found", contrast_ratio=contrast_ratio, alpha=best)
    else:
        log.debug("contrast_blend_fallback", contrast_ratio=contrast_ratio, alpha=best)
    return best


# =============================================================================
# Public API
# =============================================================================

def get_blend_value_with_minimum_contrast(source: ColorLike, target: ColorLike, base: ColorLike,
                                          contrast_ratio: float) -> int:
    """
    Alpha with which to blend |target| onto |source| so the result has at
    least |contrast_ratio| against |base|.

    Returns 0 if |source| already meets the ratio, and ALPHA_OPAQUE if the
    ratio cannot be reached. |base| must be opaque.
    """
    assert color_get_a(base) == ALPHA_OPAQUE, "base must be opaque"
    source = get_resulting_paint_color(source, base)
    if get_contrast_ratio(source, base) >= contrast_ratio:
        return ALPHA_TRANSPARENT

    target = get_resulting_paint_color(target, base)
    return find_blend_value_for_contrast_ratio(source, target, base, contrast_ratio,
                                               CLOSE_ENOUGH_ALPHA_DELTA)


def get_color_with_max_contrast(color: ColorLike) -> Color:
    """White for dark colors, the darkest anchor otherwise."""
    return list(COLOR_WHITE) if is_dark(color) else list(DARKEST_COLOR)


def get_color_with_minimum_contrast(default_foreground: ColorLike, background: ColorLike) -> Color:
    """
    Text color based on |default_foreground| that is readable on |background|.

    Returns |default_foreground| when it already meets
    MIN_READABLE_CONTRAST_RATIO. Otherwise blends it darker or lighter until
    the ratio is met or the color cannot get any more extreme. |background|
    must be opaque.
    """
    contrasting_color = get_color_with_max_contrast(background)
    alpha = get_blend_value_with_minimum_contrast(default_foreground, contrasting_color,
                                                  background, MIN_READABLE_CONTRAST_RATIO)
    return alpha_blend(contrasting_color, default_foreground, alpha)
