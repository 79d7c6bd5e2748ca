"""
neofont.core.font - representation of font

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from neofont.base import GlyphIndexError
from .glyph import Glyph, MIN_HEIGHT, MAX_HEIGHT, DEFAULT_WIDTH
from .ident import USER_MIN


# number of glyphs, one per code point of the device's 8-bit encoding
GLYPH_COUNT = 256

# string capacities, in characters excluding the terminator
APPLET_NAME_CAPACITY = 35
APPLET_INFO_CAPACITY = 59
FONT_NAME_CAPACITY = 23

APPLET_NAME_PREFIX = 'Neo Font - '

DEFAULT_FONT_NAME = 'Unnamed'
DEFAULT_APPLET_INFO = 'Neo Custom Font. Copyright (c) 2008 [author].'
DEFAULT_HEIGHT = 16

# major.minor followed by an optional build character
_VERSION_PATTERN = re.compile(r'\s*([-+]?\d+)(?:\.\s*([-+]?\d+)(.)?)?', re.DOTALL)


def _bounded(text, capacity):
    """Cut string at any embedded NUL and at field capacity."""
    text, _, _ = str(text).partition('\0')
    if len(text) > capacity:
        logging.warning('Truncating %r to %d characters.', text, capacity)
    return text[:capacity]


def _is_printable(char):
    return ' ' <= char <= '~'


class Font:
    """
    Font of 256 glyphs sharing a common height, with applet metadata.

    Setters store the canonical value (clamped or truncated) and return it.
    """

    def __init__(self):
        self._applet_name = ''
        self._applet_info = ''
        self._font_name = ''
        self._version_major = 1
        self._version_minor = 0
        self._version_build = ' '
        self._version_string = ''
        self._ident = USER_MIN
        self._height = DEFAULT_HEIGHT
        self._glyphs = tuple(Glyph() for _ in range(GLYPH_COUNT))
        self.set_font_name(DEFAULT_FONT_NAME)
        self.set_applet_info(DEFAULT_APPLET_INFO)
        self.clear()
        self.set_height(DEFAULT_HEIGHT)
        self._remake_version_string()

    def __repr__(self):
        return (
            f'{type(self).__name__}(font_name={self._font_name!r}, '
            f'version={self._version_string!r}, ident={self._ident:#06x}, '
            f'height={self._height})'
        )

    def __eq__(self, other):
        if not isinstance(other, Font):
            return NotImplemented
        return (
            self._applet_name == other._applet_name
            and self._applet_info == other._applet_info
            and self._font_name == other._font_name
            and self._version_string == other._version_string
            and self._ident == other._ident
            and self._height == other._height
            and self._glyphs == other._glyphs
        )

    def copy(self):
        """Create an independent copy of the font."""
        font = type(self).__new__(type(self))
        font.__dict__.update(vars(self))
        font._glyphs = tuple(_g.copy() for _g in self._glyphs)
        return font

    ##########################################################################
    # glyph access

    def glyph(self, index):
        """Get glyph by code point 0--255."""
        if not 0 <= index < GLYPH_COUNT:
            raise GlyphIndexError(
                f'Glyph index {index} outside range 0--{GLYPH_COUNT-1}'
            )
        return self._glyphs[index]

    __getitem__ = glyph

    def __iter__(self):
        return iter(self._glyphs)

    def __len__(self):
        return GLYPH_COUNT

    @property
    def glyphs(self):
        """All glyphs, in code point order."""
        return self._glyphs

    @property
    def max_width(self):
        """Width of the widest glyph."""
        return max(_g.width for _g in self._glyphs)

    def clear(self):
        """
        Erase all glyphs and reset their widths to the default.
        Font height and metadata are left unchanged.
        """
        for glyph in self._glyphs:
            glyph.set_width(DEFAULT_WIDTH)
            glyph.clear()

    ##########################################################################
    # metadata

    @property
    def applet_name(self):
        """Applet name as shown in the applet manager."""
        return self._applet_name

    @property
    def applet_info(self):
        """Applet information (copyright) text."""
        return self._applet_info

    @property
    def font_name(self):
        """Font name as shown on the device."""
        return self._font_name

    @property
    def version(self):
        """Version display string."""
        return self._version_string

    @property
    def version_major(self):
        return self._version_major

    @property
    def version_minor(self):
        return self._version_minor

    @property
    def version_build(self):
        """Build character; a space means no build character."""
        return self._version_build

    @property
    def ident(self):
        """16-bit applet identifier."""
        return self._ident

    @property
    def height(self):
        """Height shared by all glyphs, in pixels."""
        return self._height

    def set_applet_name(self, name):
        self._applet_name = _bounded(name, APPLET_NAME_CAPACITY)
        return self._applet_name

    def set_applet_info(self, info):
        self._applet_info = _bounded(info, APPLET_INFO_CAPACITY)
        return self._applet_info

    def set_font_name(self, name):
        """Set the font name; the applet name is rewritten to match."""
        self._font_name = _bounded(name, FONT_NAME_CAPACITY)
        self.set_applet_name(APPLET_NAME_PREFIX + self._font_name)
        return self._font_name

    def set_version(self, version):
        """
        Set version from a string of the form `major.minor[build]`.

        The minor number is parsed as a decimal integer, so "2.05b" and
        "2.5b" both give minor version 5. Fields that cannot be parsed keep
        their previous value; a missing build character clears it.
        """
        major, minor, build = self._version_major, self._version_minor, ' '
        match = _VERSION_PATTERN.match(str(version))
        if match:
            major = int(match.group(1))
            if match.group(2) is not None:
                minor = int(match.group(2))
            if match.group(3) is not None:
                build = match.group(3)
        self._version_major = major & 0xff
        self._version_minor = minor & 0xff
        self._version_build = build
        self._remake_version_string()
        return self._version_string

    def set_version_fields(self, major, minor, build=' '):
        """Set version from its components, clamping them to valid values."""
        self._version_major = int(major)
        self._version_minor = int(minor)
        self._version_build = str(build)[:1] or ' '
        self._remake_version_string()
        return self._version_string

    def _remake_version_string(self):
        """Force version fields into range and rebuild the display string."""
        self._version_major = max(0, min(99, self._version_major))
        self._version_minor = max(0, min(99, self._version_minor))
        if not _is_printable(self._version_build):
            self._version_build = '?'
        if self._version_build == ' ':
            self._version_string = f'{self._version_major}.{self._version_minor}'
        else:
            self._version_string = (
                f'{self._version_major}.{self._version_minor}{self._version_build}'
            )

    def set_ident(self, ident):
        """Set the applet identifier; only the low 16 bits are kept."""
        self._ident = int(ident) & 0xffff
        return self._ident

    def set_height(self, height):
        """Set the height of all glyphs, limited to 1--66. Returns the height applied."""
        height = max(MIN_HEIGHT, min(MAX_HEIGHT, int(height)))
        for glyph in self._glyphs:
            glyph.set_height(height)
        self._height = height
        return self._height
