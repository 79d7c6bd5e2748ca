"""
neofont.core.glyph - representation of single glyph

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from neofont.base import PixelIndexError
from neofont.base.binary import ceildiv


# glyph limits, in pixels
MIN_WIDTH = 1
MAX_WIDTH = 128
MIN_HEIGHT = 1
MAX_HEIGHT = 66

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8

# bitmap storage is sized for the largest glyph, one bit per pixel
_BITMAP_BYTES = ceildiv(MAX_WIDTH * MAX_HEIGHT, 8)


def _clamp(value, low, high):
    return max(low, min(high, int(value)))


class Glyph:
    """
    Single bitmapped character.

    Pixels are stored in a fixed-capacity bitmap sized for the largest
    permitted glyph; only pixels inside the current width and height are
    addressable. Pixel access outside that extent raises PixelIndexError.
    """

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
        self._width = _clamp(width, MIN_WIDTH, MAX_WIDTH)
        self._height = _clamp(height, MIN_HEIGHT, MAX_HEIGHT)
        self._bitmap = bytearray(_BITMAP_BYTES)

    ##########################################################################
    # dunder methods

    def __repr__(self):
        """Text representation."""
        return "{}(width={}, height={}, pixels=(\n{}))".format(
            type(self).__name__, self._width, self._height,
            self.as_text(start="  '", end="',\n"),
        )

    def __eq__(self, other):
        """Glyphs are equal if they have the same extent and pixels."""
        if not isinstance(other, Glyph):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self.as_matrix() == other.as_matrix()
        )

    def copy(self):
        """Create an independent copy of the glyph."""
        glyph = type(self)(self._width, self._height)
        glyph._bitmap[:] = self._bitmap
        return glyph

    @classmethod
    def from_text(cls, rows, *, ink='@'):
        """
        Create glyph from pixel-art rows.
        Width is taken from the longest row, height from the number of rows.
        """
        if isinstance(rows, str):
            rows = rows.splitlines()
        rows = tuple(rows)
        width = max((len(_row) for _row in rows), default=0)
        glyph = cls(width, len(rows))
        for y, row in enumerate(rows[:glyph.height]):
            for x, pixel in enumerate(row[:glyph.width]):
                if pixel in ink:
                    glyph.set_pixel(x, y)
        return glyph

    ##########################################################################
    # dimensions

    @property
    def width(self):
        """Glyph width in pixels."""
        return self._width

    @property
    def height(self):
        """Glyph height in pixels."""
        return self._height

    def set_width(self, width):
        """Set glyph width, limited to 1--128. Returns the width applied."""
        self._width = _clamp(width, MIN_WIDTH, MAX_WIDTH)
        return self._width

    def set_height(self, height):
        """Set glyph height, limited to 1--66. Returns the height applied."""
        self._height = _clamp(height, MIN_HEIGHT, MAX_HEIGHT)
        return self._height

    def clear(self):
        """Erase all pixels, including any outside the current extent."""
        self._bitmap[:] = bytes(_BITMAP_BYTES)

    ##########################################################################
    # pixel access

    def _locate(self, x, y):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise PixelIndexError(
                f'Pixel ({x}, {y}) outside glyph of size '
                f'{self._width}x{self._height}'
            )
        index = y * MAX_WIDTH + x
        return index // 8, 0x80 >> (index % 8)

    def get_pixel(self, x, y):
        """True if the pixel at (x, y) is set."""
        offset, mask = self._locate(x, y)
        return bool(self._bitmap[offset] & mask)

    def set_pixel(self, x, y):
        offset, mask = self._locate(x, y)
        self._bitmap[offset] |= mask

    def clear_pixel(self, x, y):
        offset, mask = self._locate(x, y)
        self._bitmap[offset] &= ~mask

    def flip_pixel(self, x, y):
        offset, mask = self._locate(x, y)
        self._bitmap[offset] ^= mask

    def change_pixel(self, x, y, value):
        """Set the pixel if `value` is true, clear it otherwise."""
        if value:
            self.set_pixel(x, y)
        else:
            self.clear_pixel(x, y)

    def _inked(self):
        """Coordinates of set pixels within the current extent."""
        return [
            (_x, _y)
            for _y in range(self._height)
            for _x in range(self._width)
            if self.get_pixel(_x, _y)
        ]

    def _redraw(self, pixels):
        """Replace the contents of the current extent with the given pixels."""
        for y in range(self._height):
            for x in range(self._width):
                self.clear_pixel(x, y)
        for x, y in pixels:
            if 0 <= x < self._width and 0 <= y < self._height:
                self.set_pixel(x, y)

    def is_blank(self):
        """Glyph has no set pixels within its extent."""
        return not self._inked()

    ##########################################################################
    # transformations

    def translate(self, dx, dy):
        """
        Shift all set pixels by (dx, dy).
        Pixels moved outside the glyph are lost; vacated pixels are cleared.
        """
        self._redraw([(_x + dx, _y + dy) for _x, _y in self._inked()])

    def flip_v(self):
        """Mirror the glyph top to bottom."""
        bottom = self._height - 1
        self._redraw([(_x, bottom - _y) for _x, _y in self._inked()])

    def flip_h(self):
        """Mirror the glyph left to right."""
        right = self._width - 1
        self._redraw([(right - _x, _y) for _x, _y in self._inked()])

    def bold(self):
        """Thicken vertical strokes by also setting each pixel's right neighbour."""
        inked = self._inked()
        self._redraw(inked + [(_x + 1, _y) for _x, _y in inked])

    ##########################################################################
    # rendering

    def as_matrix(self):
        """Tuple of rows of 0/1 pixel values within the current extent."""
        return tuple(
            tuple(int(self.get_pixel(_x, _y)) for _x in range(self._width))
            for _y in range(self._height)
        )

    def as_text(self, *, ink='@', paper='.', start='', end='\n'):
        """Text representation of the glyph, one row per line."""
        return ''.join(
            start + ''.join(ink if _pix else paper for _pix in _row) + end
            for _row in self.as_matrix()
        )
