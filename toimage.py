#!/usr/bin/env python3
"""
Draw Neo font applet to image
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import argparse

import neofont
from neofont.scripts import wrap_main


def _colour(value):
    """Parse colour given as r,g,b."""
    return tuple(int(_c) for _c in value.split(','))


# parse command line
parser = argparse.ArgumentParser()
parser.add_argument('infile', type=str)
parser.add_argument('outfile', type=str)
parser.add_argument(
    '--padding', default=1, type=int,
    help='number of pixels between character cells'
)
parser.add_argument(
    '--scale', default=1, type=int,
    help='number of image pixels that make up a pixel in the font'
)
parser.add_argument(
    '--columns', default=16, type=int,
    help='number of columns in output'
)
parser.add_argument(
    '--ink', default=(255, 255, 255), type=_colour,
    help='foreground colour as r,g,b'
)
parser.add_argument(
    '--paper', default=(0, 0, 0), type=_colour,
    help='background colour as r,g,b'
)
parser.add_argument('--debug', action='store_true', default=False)
args = parser.parse_args()

with wrap_main(args.debug):
    font = neofont.load(args.infile)
    neofont.save_image(
        font, args.outfile,
        columns=args.columns, padding=args.padding, scale=args.scale,
        ink=args.ink, paper=args.paper,
    )
