"""
neofont - tools for working with Neo font smart applets

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .base import (
    FileFormatError, DecodeError, BadMagic, SizeMismatch,
    UnexpectedCodeLayout, CorruptData, BufferTooSmall,
    GlyphIndexError, PixelIndexError,
)
from .core import Font, Glyph, GLYPH_COUNT
from .storage import (
    load, save, encode, encode_into, decode, required_size, looks_like_applet,
)
from .render import chart_text, chart_image, save_image
