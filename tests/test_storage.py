"""
neofont test suite
storage tests
"""

import io
import unittest

import neofont
from .base import BaseTester


class TestStorage(BaseTester):
    """Test loading and saving applet files."""

    def test_save_load_path(self):
        font = self.make_font()
        path = self.temp_path / 'testing.os3kapp'
        neofont.save(font, path)
        assert path.read_bytes() == neofont.encode(font)
        assert neofont.load(path) == font
        assert neofont.load(str(path)) == font

    def test_save_load_stream(self):
        font = self.make_font()
        stream = io.BytesIO()
        neofont.save(font, stream)
        stream.seek(0)
        assert neofont.load(stream) == font

    def test_looks_like_applet(self):
        assert neofont.looks_like_applet(neofont.encode(neofont.Font()))
        assert not neofont.looks_like_applet(b'\xc0\xff\xee')
        assert not neofont.looks_like_applet(b'STARTFONT 2.1\n')

    def test_load_not_applet(self):
        path = self.temp_path / 'not-a-font'
        path.write_bytes(b'STARTFONT 2.1\n')
        with self.assertRaises(neofont.BadMagic):
            neofont.load(path)


if __name__ == '__main__':
    unittest.main()
