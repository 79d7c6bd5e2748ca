"""
neofont.base.binary - binary utilities

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


def ceildiv(num, den):
    """Integer division, rounding up."""
    return -(-num // den)


def align(num, exp):
    """Round up to multiple of 2**exp."""
    mask = 2**exp - 1
    return (num + mask) & ~mask


###############################################################################
# big-endian integers in byte buffers

def _check_span(data, offset, size):
    if offset < 0 or offset + size > len(data):
        raise IndexError(
            f'Cannot access {size} byte(s) at offset {offset:#x}: '
            f'buffer holds {len(data)} bytes'
        )


def read_uint(data, offset, size):
    """Read big-endian unsigned integer of `size` bytes."""
    _check_span(data, offset, size)
    return int.from_bytes(data[offset:offset+size], 'big')


def read_uint8(data, offset):
    """Read byte."""
    return read_uint(data, offset, 1)


def read_uint16(data, offset):
    """Read big-endian 16-bit unsigned integer."""
    return read_uint(data, offset, 2)


def read_uint32(data, offset):
    """Read big-endian 32-bit unsigned integer."""
    return read_uint(data, offset, 4)


def write_uint(buffer, offset, size, value):
    """
    Write big-endian unsigned integer of `size` bytes into a mutable buffer.
    The value is truncated to the field width; negative values wrap around.
    """
    _check_span(buffer, offset, size)
    value &= (1 << (8*size)) - 1
    buffer[offset:offset+size] = value.to_bytes(size, 'big')


def write_uint8(buffer, offset, value):
    """Write byte."""
    write_uint(buffer, offset, 1, value)


def write_uint16(buffer, offset, value):
    """Write big-endian 16-bit unsigned integer."""
    write_uint(buffer, offset, 2, value)


def write_uint32(buffer, offset, value):
    """Write big-endian 32-bit unsigned integer."""
    write_uint(buffer, offset, 4, value)


def to_int8(value):
    """Interpret a byte value as signed 8-bit two's complement."""
    value &= 0xff
    return value - 0x100 if value & 0x80 else value


def read_cstring(data, offset, maxlen):
    """
    Read NUL-terminated byte string, at most `maxlen` bytes excluding the NUL.
    The string may end at the end of the buffer without terminator.
    """
    _check_span(data, offset, 0)
    chunk = bytes(data[offset:offset+maxlen])
    string, _, _ = chunk.partition(b'\0')
    return string
