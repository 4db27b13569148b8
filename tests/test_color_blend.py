"""Tests for color_blend: source-over compositing."""

import pytest

from color_blend import alpha_blend, get_resulting_paint_color
from color_primitives import color_get_a, color_set_a

FORE = [200, 200, 200, 255]
BACK = [100, 100, 100, 255]


class TestAlphaBlend:
    def test_zero_returns_background(self) -> None:
        assert alpha_blend(FORE, BACK, 0) == BACK

    def test_opaque_returns_foreground(self) -> None:
        assert alpha_blend(FORE, BACK, 255) == FORE

    def test_identity_results_are_copies(self) -> None:
        back = list(BACK)
        result = alpha_blend(FORE, back, 0)
        result[0] = 0
        assert back == BACK

    def test_midpoint_of_opaque_colors(self) -> None:
        assert alpha_blend([255, 255, 255], [0, 0, 0], 51) == [51, 51, 51, 255]

    def test_transparent_background_gives_partial_alpha(self) -> None:
        back = color_set_a(BACK, 0)
        result = alpha_blend(FORE, back, 136)
        assert color_get_a(result) == 136
        assert result[:3] == [200, 200, 200]

    def test_both_transparent_at_full_mix(self) -> None:
        fore = color_set_a(FORE, 0)
        back = color_set_a(BACK, 0)
        assert color_get_a(alpha_blend(fore, back, 255)) == 0

    def test_both_transparent_at_partial_mix(self) -> None:
        fore = color_set_a(FORE, 0)
        back = color_set_a(BACK, 0)
        assert alpha_blend(fore, back, 100) == [0, 0, 0, 0]

    def test_fractional_mix(self) -> None:
        assert alpha_blend([255, 255, 255], [0, 0, 0], 127.5) == [128, 128, 128, 255]

    def test_malformed_color_rejected_on_identity_mix(self) -> None:
        with pytest.raises(AssertionError):
            alpha_blend([1, 2], BACK, 255)
        with pytest.raises(AssertionError):
            alpha_blend(FORE, [1, 2], 0)

    def test_mix_out_of_range(self) -> None:
        with pytest.raises(AssertionError):
            alpha_blend(FORE, BACK, 256)
        with pytest.raises(AssertionError):
            alpha_blend(FORE, BACK, -1)


class TestResultingPaintColor:
    def test_opaque_foreground(self) -> None:
        assert get_resulting_paint_color([1, 2, 3], [9, 9, 9]) == [1, 2, 3, 255]

    def test_transparent_foreground(self) -> None:
        assert get_resulting_paint_color([1, 2, 3, 0], [9, 9, 9]) == [9, 9, 9]

    def test_translucent_foreground(self) -> None:
        result = get_resulting_paint_color([255, 0, 0, 128], [0, 0, 255])
        assert result == [128, 0, 127, 255]
