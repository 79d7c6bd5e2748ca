"""
neofont.render - show fonts as text or images

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from PIL import Image

from neofont.base.binary import ceildiv


def _label(index):
    """Printable form of a code point for chart headers."""
    char = chr(index)
    return char if char.isprintable() else ' '


def chart_text(font, *, ink='*', paper=' '):
    """Text dump of all glyphs, each preceded by its code point."""
    return ''.join(
        f'character {_index} {_label(_index)}\n'
        + _glyph.as_text(ink=ink, paper=paper)
        for _index, _glyph in enumerate(font.glyphs)
    )


def glyph_grid(font, *, columns=16, padding=1):
    """
    Arrange all glyphs in a grid of cells of the widest glyph's width.
    Returns a matrix of pixels: 1 for ink, 0 for paper, -1 for border.
    """
    cell_width = font.max_width + padding
    cell_height = font.height + padding
    rows = ceildiv(len(font), columns)
    matrix = [[-1] * (columns * cell_width + padding) for _ in range(rows * cell_height + padding)]
    for index, glyph in enumerate(font.glyphs):
        top = padding + (index // columns) * cell_height
        left = padding + (index % columns) * cell_width
        for y, row in enumerate(glyph.as_matrix()):
            matrix[top + y][left:left + glyph.width] = row
    return matrix


def to_image(matrix, border=(32, 32, 32), paper=(0, 0, 0), ink=(255, 255, 255)):
    """Convert matrix to image."""
    height = len(matrix)
    if height:
        width = len(matrix[0])
    else:
        width = 0
    img = Image.new('RGB', (width, height), border)
    img.putdata([{-1: border, 0: paper, 1: ink}[_pix] for _row in matrix for _pix in _row])
    return img


def chart_image(
        font, *, columns=16, padding=1, scale=1,
        border=(32, 32, 32), paper=(0, 0, 0), ink=(255, 255, 255),
    ):
    """Render all glyphs of the font to an image."""
    img = to_image(
        glyph_grid(font, columns=columns, padding=padding),
        border=border, paper=paper, ink=ink,
    )
    if scale != 1:
        img = img.resize(
            (img.width * scale, img.height * scale), resample=Image.NEAREST
        )
    return img


def save_image(font, outfile, **kwargs):
    """Save chart of the font to an image file."""
    img = chart_image(font, **kwargs)
    logging.info('Writing %dx%d image to `%s`', img.width, img.height, outfile)
    img.save(outfile)
