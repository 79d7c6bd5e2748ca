"""
neofont test suite
"""

import unittest

from tests.test_binary import *
from tests.test_glyph import *
from tests.test_font import *
from tests.test_applet import *
from tests.test_storage import *
from tests.test_render import *
from tests.test_scripts import *


if __name__ == '__main__':
    unittest.main()
