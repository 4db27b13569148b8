"""
Relative luminance and WCAG contrast ratios.

See http://www.w3.org/TR/WCAG20/#contrast-ratiodef. Functions accept a
single color, or an (n, 3|4) array of colors for batch evaluation.
"""

from typing import Union

import numpy as np

from color_primitives import ColorLike, assert_color


# =============================================================================
# Constants
# =============================================================================

# Luminance of the midpoint between the white and darkest anchors
LUMINANCE_MIDPOINT = 0.211692036

MIN_READABLE_CONTRAST_RATIO = 4.5  # WCAG AA, body text

# Rec. 709 coefficients
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

Colors = Union[ColorLike, np.ndarray]  # one color, or an (n, 3|4) array
ScalarOrArray = Union[float, np.ndarray]


def _as_result(value: np.ndarray) -> ScalarOrArray:
    return float(value) if value.ndim == 0 else value


# =============================================================================
# Luminance
# =============================================================================

def linearize(eight_bit_component: Union[float, np.ndarray]) -> ScalarOrArray:
    """Convert an 8-bit sRGB channel (0-255) to linear light (0-1)."""
    component = np.asarray(eight_bit_component, dtype=np.float64) / 255.0
    # The W3C text uses 0.03928 here; 0.04045 is the sRGB standard value and
    # what browsers use.
    linear = np.where(component <= 0.04045,
                      component / 12.92,
                      ((component + 0.055) / 1.055) ** 2.4)
    return _as_result(linear)


def relative_luminance(color: Colors) -> ScalarOrArray:
    """Relative luminance (0-1) of a color. Alpha is ignored."""
    rgb = np.asarray(color, dtype=np.float64)
    if rgb.ndim == 1:
        assert_color(rgb)
    else:
        assert rgb.shape[-1] in (3, 4), f"colors must have 3 or 4 channels: {rgb.shape}"

    linear = np.asarray(linearize(rgb[..., :3]))
    luminance = (RED_WEIGHT * linear[..., 0]
                 + GREEN_WEIGHT * linear[..., 1]
                 + BLUE_WEIGHT * linear[..., 2])
    return _as_result(np.asarray(luminance))


def is_dark(color: ColorLike) -> bool:
    return relative_luminance(color) < LUMINANCE_MIDPOINT


# =============================================================================
# Contrast
# =============================================================================

def contrast_ratio_from_luminance(luminance_a: ScalarOrArray,
                                  luminance_b: ScalarOrArray) -> ScalarOrArray:
    """Contrast ratio (1-21) between two relative luminance values."""
    a = np.asarray(luminance_a, dtype=np.float64) + 0.05
    b = np.asarray(luminance_b, dtype=np.float64) + 0.05
    return _as_result(np.maximum(a, b) / np.minimum(a, b))


def get_contrast_ratio(color_a: Colors, color_b: Colors) -> ScalarOrArray:
    """Contrast ratio (1-21) between two colors. Order does not matter."""
    return contrast_ratio_from_luminance(relative_luminance(color_a),
                                         relative_luminance(color_b))


def meets_minimum_contrast(color_a: ColorLike, color_b: ColorLike,
                           min_ratio: float = MIN_READABLE_CONTRAST_RATIO) -> bool:
    return get_contrast_ratio(color_a, color_b) >= min_ratio


def wcag_level(ratio: float) -> str:
    """Classify a contrast ratio as "AAA", "AA", "AA-large" or "fail"."""
    if ratio >= 7:
        return "AAA"
    elif ratio >= MIN_READABLE_CONTRAST_RATIO:
        return "AA"
    elif ratio >= 3:
        return "AA-large"
    return "fail"
