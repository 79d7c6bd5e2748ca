"""
neofont test suite
command-line script tests
"""

import io
import unittest
from unittest import mock
from contextlib import redirect_stdout

import neofont
from neofont.scripts import dump, edit
from .base import BaseTester


class TestDump(BaseTester):
    """Test the applet dump script."""

    def test_dump(self):
        infile = self.temp_path / 'in.os3kapp'
        outfile = self.temp_path / 'out.os3kapp'
        neofont.save(self.make_font(), infile)
        output = io.StringIO()
        with redirect_stdout(output):
            dump.main([str(infile), '--output', str(outfile)])
        assert 'character 65 A\n  **  \n' in output.getvalue()
        assert outfile.read_bytes() == infile.read_bytes()

    def test_dump_quiet(self):
        infile = self.temp_path / 'in.os3kapp'
        outfile = self.temp_path / 'out.os3kapp'
        neofont.save(neofont.Font(), infile)
        output = io.StringIO()
        with redirect_stdout(output):
            dump.main([str(infile), '-o', str(outfile), '--quiet'])
        assert output.getvalue() == ''
        assert outfile.exists()

    def test_dump_bad_file(self):
        infile = self.temp_path / 'bad'
        infile.write_bytes(b'not an applet')
        with self.assertRaises(SystemExit):
            dump.main([str(infile), '-o', str(self.temp_path / 'out')])


class TestEdit(BaseTester):
    """Test the applet editing script."""

    def test_new(self):
        outfile = self.temp_path / 'new.os3kapp'
        edit.main([
            '--new', str(outfile),
            '--font-name', 'Scripted', '--version', '1.2a',
            '--ident', '0x7172', '--height', '10',
        ])
        font = neofont.load(outfile)
        assert font.font_name == 'Scripted'
        assert font.version == '1.2a'
        assert font.ident == 0x7172
        assert font.height == 10

    def test_transform(self):
        infile = self.temp_path / 'in.os3kapp'
        outfile = self.temp_path / 'out.os3kapp'
        neofont.save(self.make_font(), infile)
        edit.main([str(infile), str(outfile), '--bold', '--flip-v'])
        glyph = neofont.load(outfile)[ord('i')]
        assert glyph.as_text() == '@\n@\n@\n@\n.\n@\n'

    def test_ident_outside_user_range(self):
        outfile = self.temp_path / 'new.os3kapp'
        with mock.patch.object(edit.logging, 'warning') as warning:
            edit.main(['--new', str(outfile), '--ident', '0xa001'])
        assert warning.called
        assert neofont.load(outfile).ident == 0xa001

    def test_missing_input(self):
        with self.assertRaises(SystemExit):
            edit.main([str(self.temp_path / 'out')])


if __name__ == '__main__':
    unittest.main()
