"""
neofont.base.errors - exception types

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

__all__ = [
    'FileFormatError', 'DecodeError', 'BadMagic', 'SizeMismatch',
    'UnexpectedCodeLayout', 'CorruptData', 'BufferTooSmall',
    'GlyphIndexError', 'PixelIndexError',
]


class FileFormatError(Exception):
    """Incorrect file format."""


class DecodeError(FileFormatError):
    """Applet data could not be decoded."""


class BadMagic(DecodeError):
    """Applet does not start with the expected magic number."""


class SizeMismatch(DecodeError):
    """Size recorded in the applet header differs from the data length."""


class UnexpectedCodeLayout(DecodeError):
    """Loader code does not have the expected instruction shape."""


class CorruptData(DecodeError):
    """Font tables or bitmaps point outside the applet data."""


class BufferTooSmall(ValueError):
    """Output buffer cannot hold the encoded applet."""


class GlyphIndexError(IndexError):
    """Glyph index outside the font's code range."""


class PixelIndexError(IndexError):
    """Pixel coordinate outside the glyph's extent."""
