"""
Show the glyphs of a Neo font applet and write it back out
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse

import neofont
from neofont.scripts import wrap_main


DEFAULT_OUTPUT = 'test-output'


def get_parser():
    parser = argparse.ArgumentParser(
        description='Decode a Neo font applet, print its glyphs and re-encode it.'
    )
    parser.add_argument('infile', type=str, help='applet file to read')
    parser.add_argument(
        '--output', '-o', default=DEFAULT_OUTPUT, type=str,
        help=f're-encoded applet file to write (default: {DEFAULT_OUTPUT})'
    )
    parser.add_argument(
        '--quiet', '-q', action='store_true', default=False,
        help='do not print glyphs'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    with wrap_main(args.debug):
        font = neofont.load(args.infile)
        if not args.quiet:
            sys.stdout.write(neofont.chart_text(font))
        neofont.save(font, args.output)


if __name__ == '__main__':
    main()
