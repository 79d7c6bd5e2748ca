"""
neofont.core - font and glyph data model

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .font import Font, GLYPH_COUNT
from .glyph import Glyph
from . import ident
