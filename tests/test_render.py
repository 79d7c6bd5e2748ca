"""
neofont test suite
rendering tests
"""

import unittest

import neofont
from neofont.render import glyph_grid
from .base import BaseTester


class TestRender(BaseTester):
    """Test text and image rendering."""

    def test_chart_text(self):
        font = self.make_font()
        text = neofont.chart_text(font)
        lines = text.splitlines()
        assert lines[0] == 'character 0  '
        # 256 headers and 6 rows per glyph
        assert len(lines) == 256 * 7
        index = lines.index('character 65 A')
        assert lines[index+1:index+7] == [
            '  **  ',
            ' *  * ',
            '*    *',
            '******',
            '*    *',
            '*    *',
        ]

    def test_grid(self):
        font = neofont.Font()
        font.set_height(4)
        font[1].set_pixel(0, 0)
        grid = glyph_grid(font, columns=16, padding=1)
        assert len(grid) == 16 * 5 + 1
        assert len(grid[0]) == 16 * 9 + 1
        assert grid[0][0] == -1
        assert grid[1][1] == 0
        assert grid[1][10] == 1

    def test_chart_image(self):
        font = neofont.Font()
        font[0].set_pixel(0, 0)
        img = neofont.chart_image(font)
        assert img.size == (16 * 9 + 1, 16 * 17 + 1)
        assert img.getpixel((0, 0)) == (32, 32, 32)
        assert img.getpixel((1, 1)) == (255, 255, 255)
        assert img.getpixel((2, 1)) == (0, 0, 0)

    def test_chart_image_scaled(self):
        font = neofont.Font()
        img = neofont.chart_image(font, scale=2, columns=32, padding=0)
        assert img.size == (32 * 8 * 2, 8 * 16 * 2)

    def test_save_image(self):
        path = self.temp_path / 'chart.png'
        neofont.save_image(self.make_font(), path)
        assert path.exists()


if __name__ == '__main__':
    unittest.main()
