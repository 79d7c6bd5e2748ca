"""
neofont.storage - load and save Neo font applets

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from neofont.base import FileFormatError
from .applet import (
    encode, encode_into, decode, required_size,
    load_applet, save_applet, looks_like_applet,
)


def load(infile):
    """
    Load font from a Neo smart applet.

    infile: file path or binary stream
    """
    if isinstance(infile, (str, Path)):
        logging.info('Loading font from `%s`', infile)
        with open(infile, 'rb') as instream:
            return load_applet(instream)
    return load_applet(infile)


def save(font, outfile):
    """
    Save font to a Neo smart applet.

    outfile: file path or binary stream
    """
    if isinstance(outfile, (str, Path)):
        logging.info('Saving font to `%s`', outfile)
        with open(outfile, 'wb') as outstream:
            save_applet(font, outstream)
    else:
        save_applet(font, outfile)
