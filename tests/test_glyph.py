"""
neofont test suite
glyph tests
"""

import unittest

from neofont import Glyph, PixelIndexError
from .base import BaseTester, assert_text_eq


class TestGlyph(BaseTester):
    """Test glyph dimensions and pixel access."""

    def test_defaults(self):
        glyph = Glyph()
        assert glyph.width == 8
        assert glyph.height == 8
        assert glyph.is_blank()

    def test_width_clamped(self):
        glyph = Glyph()
        assert glyph.set_width(0) == 1
        assert glyph.width == 1
        assert glyph.set_width(-20) == 1
        assert glyph.set_width(500) == 128
        assert glyph.width == 128
        assert glyph.set_width(17) == 17

    def test_height_clamped(self):
        glyph = Glyph()
        assert glyph.set_height(0) == 1
        assert glyph.set_height(67) == 66
        assert glyph.height == 66
        assert glyph.set_height(12) == 12

    def test_pixels(self):
        glyph = Glyph()
        assert not glyph.get_pixel(3, 4)
        glyph.set_pixel(3, 4)
        assert glyph.get_pixel(3, 4)
        glyph.flip_pixel(3, 4)
        assert not glyph.get_pixel(3, 4)
        glyph.flip_pixel(0, 7)
        assert glyph.get_pixel(0, 7)
        glyph.clear_pixel(0, 7)
        assert not glyph.get_pixel(0, 7)
        glyph.change_pixel(7, 0, 1)
        assert glyph.get_pixel(7, 0)
        glyph.change_pixel(7, 0, 0)
        assert glyph.is_blank()

    def test_pixel_outside_extent(self):
        glyph = Glyph(width=4, height=5)
        for x, y in ((4, 0), (0, 5), (-1, 0), (0, -1)):
            with self.assertRaises(PixelIndexError):
                glyph.get_pixel(x, y)
            with self.assertRaises(IndexError):
                glyph.set_pixel(x, y)

    def test_pixels_kept_when_shrinking(self):
        glyph = Glyph(width=8, height=8)
        glyph.set_pixel(7, 7)
        glyph.set_width(4)
        assert glyph.is_blank()
        glyph.set_width(8)
        assert glyph.get_pixel(7, 7)

    def test_clear(self):
        glyph = Glyph(width=8, height=8)
        glyph.set_pixel(7, 7)
        glyph.set_width(2)
        glyph.clear()
        glyph.set_width(8)
        assert glyph.is_blank()
        assert glyph.width == 8

    def test_text(self):
        glyph = Glyph.from_text(self.letter_A)
        assert glyph.width == 6
        assert glyph.height == 6
        assert_text_eq(glyph.as_text(), self.letter_A)
        assert glyph.as_matrix()[0] == (0, 0, 1, 1, 0, 0)

    def test_copy_and_equality(self):
        glyph = Glyph.from_text(self.letter_A)
        other = glyph.copy()
        assert other == glyph
        other.flip_pixel(0, 0)
        assert other != glyph
        assert glyph.get_pixel(0, 0) is False


class TestGlyphTrafo(BaseTester):
    """Test glyph transformations."""

    def test_translate(self):
        glyph = Glyph.from_text(('@...', '.@..', '....'))
        glyph.translate(1, 1)
        assert_text_eq(glyph.as_text(), '....\n.@..\n..@.\n')

    def test_translate_drops_pixels(self):
        glyph = Glyph.from_text(('@...', '.@..', '....'))
        glyph.translate(-1, 0)
        assert_text_eq(glyph.as_text(), '....\n@...\n....\n')
        glyph.translate(0, 5)
        assert glyph.is_blank()

    def test_flip_h(self):
        glyph = Glyph.from_text(('@@..', '.@..'))
        glyph.flip_h()
        assert_text_eq(glyph.as_text(), '..@@\n..@.\n')

    def test_flip_v(self):
        glyph = Glyph.from_text(self.letter_A)
        glyph.flip_v()
        assert_text_eq(glyph.as_text(), ''.join(
            _row + '\n' for _row in reversed(self.letter_A.splitlines())
        ))

    def test_flips_are_involutions(self):
        glyph = Glyph.from_text(self.letter_A)
        glyph.flip_h()
        glyph.flip_h()
        glyph.flip_v()
        glyph.flip_v()
        assert_text_eq(glyph.as_text(), self.letter_A)

    def test_bold(self):
        glyph = Glyph.from_text(('@.@.', '...@', '@...'))
        glyph.bold()
        assert_text_eq(glyph.as_text(), '@@@@\n...@\n@@..\n')


if __name__ == '__main__':
    unittest.main()
