"""
neofont.storage.applet - Neo font smart applet

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from itertools import accumulate

from neofont.base import (
    BadMagic, SizeMismatch, UnexpectedCodeLayout, CorruptData, BufferTooSmall,
)
from neofont.base.binary import (
    ceildiv, align, read_uint8, read_uint16, read_uint32, write_uint32,
    to_int8, read_cstring,
)
from neofont.base.struct import big_endian as be, StructError
from neofont.core import Font, GLYPH_COUNT
from neofont.core.font import APPLET_NAME_PREFIX, FONT_NAME_CAPACITY
from neofont.core.glyph import MAX_WIDTH, MIN_HEIGHT, MAX_HEIGHT
from .loader import (
    LOADER_PREFIX, LOADER_SIZE, PATCHES, LOCATOR,
    MOVEA_L_IMM_A0, LEA_PC_INDEX_A0, LEA_EXTENSION,
)


APPLET_MAGIC = 0xc0ffeead
TRAILER_MAGIC = 0xcafefeed

# number of applet name and info bytes written, excluding the NUL
APPLET_NAME_STORED = 31
APPLET_INFO_STORED = 63

# font name stored after the loader code, used if the applet name is too short
FONT_NAME_OFFSET = LOADER_SIZE


# fixed part of the applet header, overlaid on the loader prefix
_APPLET_HEADER = be.Struct(
    magic='uint32',
    file_size='uint32',
    unknown_0=be.uint8 * 12,
    # 0x14
    ident='uint16',
    unknown_1=be.uint8 * 2,
    # 0x18
    applet_name='36s',
    # 0x3c
    version_major='uint8',
    version_minor='uint8',
    # ascii build character
    version_build='uint8',
    unknown_2='uint8',
    # 0x40
    applet_info='64s',
)

# font info block, located through the loader code
_FONT_INFO = be.Struct(
    height='uint8',
    max_width='uint8',
    # max_width * bytes per column
    max_bytes='uint8',
    reserved='uint8',
    # absolute offsets in the applet
    width_table='uint32',
    location_table='uint32',
    bitmap_data='uint32',
)

_WIDTH_TABLE = be.uint8 * GLYPH_COUNT
_LOCATION_TABLE = be.uint16 * GLYPH_COUNT
_TRAILER = be.uint32


def looks_like_applet(data):
    """Check for the applet magic number."""
    return len(data) >= 4 and read_uint32(data, 0) == APPLET_MAGIC


def _bytes_per_column(height):
    return ceildiv(height, 8)


def _encode_text(text):
    if any(ord(_c) > 0xff for _c in text):
        logging.warning('Replacing characters in %r that cannot be stored.', text)
    return text.encode('latin-1', 'replace')


def _decode_text(data):
    return data.decode('latin-1')


###############################################################################
# encoder

def required_size(font):
    """Size in bytes of the applet encoding the font."""
    size = align(LOADER_SIZE + len(_encode_text(font.font_name)) + 1, 1)
    bytes_per_column = _bytes_per_column(font.height)
    size += sum(_g.width * bytes_per_column for _g in font.glyphs)
    size = align(size, 2)
    size += _WIDTH_TABLE.size + _LOCATION_TABLE.size
    size += _FONT_INFO.size + _TRAILER.size
    return size


def _glyph_bytes(glyph, bytes_per_column):
    """
    Convert glyph to column-banded bytes.
    Byte b holds column b % width of the 8-row band b // width, top row in bit 0.
    """
    matrix = glyph.as_matrix()
    width = glyph.width
    data = bytearray(width * bytes_per_column)
    for y, row in enumerate(matrix):
        band = (y // 8) * width
        bit = 1 << (y % 8)
        for x, pixel in enumerate(row):
            if pixel:
                data[band + x] |= bit
    return bytes(data)


def _build_header(font, file_size):
    """Overlay the font's metadata on the header of the loader prefix."""
    header = _APPLET_HEADER.from_bytes(LOADER_PREFIX)
    header.file_size = file_size
    header.ident = font.ident
    header.applet_name = _encode_text(font.applet_name)[:APPLET_NAME_STORED]
    header.version_major = font.version_major
    header.version_minor = font.version_minor
    header.version_build = ord(font.version_build)
    header.applet_info = _encode_text(font.applet_info)[:APPLET_INFO_STORED]
    if len(font.applet_name) > APPLET_NAME_STORED:
        logging.warning(
            'Applet name %r truncated to %d characters in applet.',
            font.applet_name, APPLET_NAME_STORED
        )
    return header


def _patch_loader(data, font_info_offset):
    """Point the loader code's address computations at the font info block."""
    for patch in PATCHES:
        target = font_info_offset + _FONT_INFO.offset_of(patch.field)
        write_uint32(data, patch.operand_offset, target - patch.base)


def encode(font):
    """Convert font to smart applet bytes."""
    bytes_per_column = _bytes_per_column(font.height)
    name = _encode_text(font.font_name) + b'\0'
    name += bytes(align(LOADER_SIZE + len(name), 1) - LOADER_SIZE - len(name))
    bitmap_offset = LOADER_SIZE + len(name)
    glyph_data = tuple(_glyph_bytes(_g, bytes_per_column) for _g in font.glyphs)
    strike = b''.join(glyph_data)
    strike += bytes(align(bitmap_offset + len(strike), 2) - bitmap_offset - len(strike))
    width_table_offset = bitmap_offset + len(strike)
    location_table_offset = width_table_offset + _WIDTH_TABLE.size
    font_info_offset = location_table_offset + _LOCATION_TABLE.size
    locations = tuple(accumulate(
        (len(_d) for _d in glyph_data[:-1]), initial=0
    ))
    if locations[-1] > 0xffff:
        logging.warning(
            'Bitmap data exceeds 64 KiB; location table entries will wrap.'
        )
    max_width = font.max_width
    max_bytes = max_width * bytes_per_column
    if max_bytes > 0xff:
        logging.warning(
            'Largest glyph has %d bytes; font info will record %d.',
            max_bytes, max_bytes & 0xff
        )
    font_info = _FONT_INFO(
        height=font.height,
        max_width=max_width,
        max_bytes=max_bytes & 0xff,
        reserved=0,
        width_table=width_table_offset,
        location_table=location_table_offset,
        bitmap_data=bitmap_offset,
    )
    file_size = font_info_offset + _FONT_INFO.size + _TRAILER.size
    header = _build_header(font, file_size)
    data = bytearray().join((
        bytes(header),
        LOADER_PREFIX[_APPLET_HEADER.size:],
        name,
        strike,
        bytes(_WIDTH_TABLE(*(_g.width for _g in font.glyphs))),
        bytes(_LOCATION_TABLE(*(_loc & 0xffff for _loc in locations))),
        bytes(font_info),
        bytes(_TRAILER(TRAILER_MAGIC)),
    ))
    _patch_loader(data, font_info_offset)
    logging.debug(
        'Encoded applet of %d bytes; font info at %#x', len(data), font_info_offset
    )
    return bytes(data)


def encode_into(font, buffer):
    """
    Encode font into a caller-supplied writable buffer.
    Returns the number of bytes written. The buffer is left untouched if it
    is too small to hold the applet.
    """
    size = required_size(font)
    if len(buffer) < size:
        raise BufferTooSmall(
            f'Applet needs {size} bytes, buffer holds {len(buffer)}.'
        )
    buffer[:size] = encode(font)
    return size


###############################################################################
# decoder

def _check_code_layout(data):
    """Check the shape of the instructions that locate the font info block."""
    offset = LOCATOR.operand_offset
    try:
        opcode = read_uint16(data, offset - 2)
        lea = read_uint16(data, offset + 4)
        extension = read_uint8(data, offset + 6)
    except IndexError as e:
        raise UnexpectedCodeLayout('Applet too short to hold loader code.') from e
    if (
            opcode != MOVEA_L_IMM_A0
            or lea != LEA_PC_INDEX_A0
            or extension != LEA_EXTENSION
        ):
        raise UnexpectedCodeLayout(
            f'Unexpected loader code {opcode:04x} {lea:04x} {extension:02x}.'
        )


def _locate_font_info(data):
    """Follow the loader code to the font info block."""
    offset = LOCATOR.operand_offset
    operand = read_uint32(data, offset)
    displacement = to_int8(read_uint8(data, offset + 7))
    # pc-relative to the extension word following the lea opcode
    return offset + 6 + displacement + operand


def _read_font_name(data, applet_name):
    """
    Get the font name; derived from the applet name when that is long enough
    to hold the usual prefix, otherwise read from the applet body.
    """
    if len(applet_name) > len(APPLET_NAME_PREFIX):
        offset = _APPLET_HEADER.offset_of('applet_name') + len(APPLET_NAME_PREFIX)
    else:
        offset = FONT_NAME_OFFSET
    return _decode_text(read_cstring(data, offset, FONT_NAME_CAPACITY))


def _read_glyphs(data, font_info):
    """Read widths and pixel coordinates of all glyphs."""
    height = max(MIN_HEIGHT, min(MAX_HEIGHT, font_info.height))
    bytes_per_column = _bytes_per_column(height)
    widths = _WIDTH_TABLE.from_bytes(data, font_info.width_table)
    locations = _LOCATION_TABLE.from_bytes(data, font_info.location_table)
    glyphs = []
    for index, (width, location) in enumerate(zip(widths, locations)):
        start = font_info.bitmap_data + location
        glyph_data = data[start:start + width*bytes_per_column]
        if len(glyph_data) < width*bytes_per_column:
            raise CorruptData(
                f'Bitmap for glyph {index} at {start:#x} extends beyond applet.'
            )
        pixels = tuple(
            (_x, _y)
            for _x in range(min(width, MAX_WIDTH))
            for _y in range(height)
            if glyph_data[(_y // 8) * width + _x] & (1 << (_y % 8))
        )
        glyphs.append((width, pixels))
    return glyphs


def decode(data, font=None):
    """
    Parse smart applet bytes into a font.

    If `font` is given, it is overwritten in place and returned; otherwise a
    new font is created. All checks happen before the font is changed, so a
    failed decode leaves it as it was.
    """
    data = bytes(data)
    if not looks_like_applet(data):
        raise BadMagic('Not a Neo font applet: magic number not found.')
    file_size = read_uint32(data, 4) if len(data) >= 8 else None
    if file_size != len(data):
        raise SizeMismatch(
            f'Applet size field {file_size} does not match data length {len(data)}.'
        )
    _check_code_layout(data)
    try:
        header = _APPLET_HEADER.from_bytes(data)
        font_info_offset = _locate_font_info(data)
        logging.debug('Font info at %#x', font_info_offset)
        font_info = _FONT_INFO.from_bytes(data, font_info_offset)
        logging.debug('Font info: %s', font_info)
        applet_name = _decode_text(header.applet_name)
        font_name = _read_font_name(data, applet_name)
        glyphs = _read_glyphs(data, font_info)
    except (StructError, IndexError) as e:
        raise CorruptData(f'Font tables extend beyond applet: {e}') from e
    logging.debug('Applet name: %r', applet_name)
    logging.debug('Font name: %r', font_name)
    # all reads done, now update the font
    if font is None:
        font = Font()
    font.set_height(font_info.height)
    font.set_applet_name(applet_name)
    font.set_applet_info(_decode_text(header.applet_info))
    font.set_font_name(font_name)
    font.set_version_fields(
        header.version_major, header.version_minor, chr(header.version_build)
    )
    font.set_ident(header.ident)
    font.clear()
    for glyph, (width, pixels) in zip(font.glyphs, glyphs):
        glyph.set_width(width)
        for x, y in pixels:
            glyph.set_pixel(x, y)
    return font


###############################################################################
# streams

def load_applet(instream):
    """Load font from Neo smart applet file."""
    return decode(instream.read())


def save_applet(font, outstream):
    """Save font to Neo smart applet file."""
    outstream.write(encode(font))
