"""
Change metadata and glyphs of a Neo font applet
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import argparse
import logging

import neofont
from neofont.core import ident
from neofont.scripts import wrap_main


def _int(value):
    """Parse decimal or 0x-prefixed hex integer."""
    return int(value, 0)


def get_parser():
    parser = argparse.ArgumentParser(
        description='Modify a Neo font applet.'
    )
    parser.add_argument('infile', nargs='?', type=str, default='', help='applet file to read')
    parser.add_argument('outfile', type=str, help='applet file to write')
    parser.add_argument(
        '--new', action='store_true', default=False,
        help='start from an empty default font instead of reading a file'
    )
    parser.add_argument('--font-name', type=str, help='set the font name')
    parser.add_argument('--applet-info', type=str, help='set the applet information text')
    parser.add_argument('--version', type=str, help='set the version, as major.minor[build]')
    parser.add_argument('--ident', type=_int, help='set the 16-bit applet identifier')
    parser.add_argument('--height', type=int, help='set the font height')
    parser.add_argument(
        '--translate', type=int, nargs=2, metavar=('DX', 'DY'),
        help='shift all glyphs'
    )
    parser.add_argument('--flip-h', action='store_true', default=False, help='mirror all glyphs')
    parser.add_argument('--flip-v', action='store_true', default=False, help='turn all glyphs upside down')
    parser.add_argument('--bold', action='store_true', default=False, help='embolden all glyphs')
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    return parser


def modify(font, args):
    """Apply the requested changes to the font."""
    if args.font_name is not None:
        font.set_font_name(args.font_name)
    if args.applet_info is not None:
        font.set_applet_info(args.applet_info)
    if args.version is not None:
        font.set_version(args.version)
    if args.ident is not None:
        applied = font.set_ident(args.ident)
        if 'user' not in ident.ident_ranges(applied):
            logging.warning(
                'Ident %#06x is outside the unregistered range %#06x--%#06x.',
                applied, ident.USER_MIN, ident.USER_MAX
            )
    if args.height is not None:
        font.set_height(args.height)
    for glyph in font.glyphs:
        if args.translate:
            glyph.translate(*args.translate)
        if args.flip_h:
            glyph.flip_h()
        if args.flip_v:
            glyph.flip_v()
        if args.bold:
            glyph.bold()
    return font


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    with wrap_main(args.debug):
        if args.new:
            font = neofont.Font()
        elif not args.infile:
            parser.error('an input file is required unless --new is given')
        else:
            font = neofont.load(args.infile)
        font = modify(font, args)
        neofont.save(font, args.outfile)


if __name__ == '__main__':
    main()
