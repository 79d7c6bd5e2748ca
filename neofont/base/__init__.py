"""
neofont.base - supporting classes

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .errors import *
from . import struct
from . import binary
