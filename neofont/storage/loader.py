"""
neofont.storage.loader - applet prefix and loader code

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple


# applet header followed by the 68k font loader code
# header fields are overwritten on encoding; see neofont.storage.applet
LOADER_PREFIX = bytes.fromhex("""
    c0 ff ee ad 00 00 10 44 00 00 00 10 00 00 00 00
    ff 00 00 31 af 00 01 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 01 00 20 01
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 94 00 00 00 00 00 00 00 01
    00 00 00 02 48 e7 03 00 2e 2f 00 0c 2c 2f 00 10
    20 6f 00 14 42 90 20 3c ff 00 00 00 c0 87 67 6e
    20 7c 00 00 00 82 4e bb 88 fe 02 87 00 ff ff ff
    20 07 0c 80 00 01 00 00 64 4e 0c 40 00 01 67 0e
    0c 40 00 02 67 18 0c 40 00 06 67 20 60 3a 20 46
    22 7c 00 00 01 0c 43 fb 98 fe 20 89 60 44 20 3c
    00 00 00 00 d0 8d 20 46 20 80 60 36 20 7c 00 00
    00 36 4e bb 88 fe 22 3c 00 00 00 00 70 00 10 35
    18 00 20 46 20 80 60 1a 20 46 42 90 60 14 20 07
    72 18 b0 81 67 02 60 0a 20 7c 00 00 00 0a 4e bb
    88 fe 4c df 00 c0 4e 75 20 3c 00 00 00 00 d0 8d
    22 40 20 7c 00 00 0e e8 41 fb 88 fe 12 90 20 7c
    00 00 0e dd 41 fb 88 fe 13 50 00 01 20 7c 00 00
    0e d0 41 fb 88 fe 13 50 00 02 20 7c 00 00 0e c3
    41 fb 88 fe 13 50 00 03 20 7c 00 00 0e b6 41 fb
    88 fe 23 50 00 04 4a a9 00 04 67 14 20 10 20 7c
    ff ff fe 6c 41 fb 88 fe 22 08 d0 81 23 40 00 04
    20 7c 00 00 0e 92 41 fb 88 fe 23 50 00 08 4a a9
    00 08 67 14 20 10 20 7c ff ff fe 44 41 fb 88 fe
    22 08 d0 81 23 40 00 08 20 7c 00 00 0e 6e 41 fb
    88 fe 23 50 00 0c 4a a9 00 0c 67 14 20 10 20 7c
    ff ff fe 1c 41 fb 88 fe 22 08 d0 81 23 40 00 0c
    4e 75
""")

LOADER_SIZE = len(LOADER_PREFIX)


# the loader finds the font info block through pairs of instructions
#   movea.l #<operand>, a0
#   lea (<displacement>, pc, a0.l), a0
# so that <operand> plus the pc-relative base gives the field's address.
# on encoding, each operand is rewritten so that
#   operand + base == font info offset + field offset

MOVEA_L_IMM_A0 = 0x207c
LEA_PC_INDEX_A0 = 0x41fb
# brief extension word, high byte: index register a0, long index
LEA_EXTENSION = 0x88

Patch = namedtuple('Patch', ('operand_offset', 'base', 'field'))

PATCHES = (
    Patch(0x144, 0x148, 'height'),
    Patch(0x150, 0x154, 'max_width'),
    Patch(0x15e, 0x162, 'max_bytes'),
    Patch(0x16c, 0x170, 'reserved'),
    Patch(0x17a, 0x17e, 'width_table'),
    Patch(0x1a2, 0x1a6, 'location_table'),
    Patch(0x1ca, 0x1ce, 'bitmap_data'),
)

# instruction pair used to locate the font info block when decoding
LOCATOR = PATCHES[0]
