import io
import unittest
from unittest import mock

from ..prelude import *

from . import colors


class FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class Test(unittest.TestCase):
    def test_strip(self):
        self.assertEqual("error: oops", colors.strip(colors.red("error:") + " oops"))

    def test_not_a_terminal_is_plain(self):
        buffer = io.StringIO()
        colors.error("unknown option: -x", file=buffer)
        self.assertEqual("error: unknown option: -x\n", buffer.getvalue())

    def test_terminal_is_colored(self):
        buffer = FakeTerminal()
        with mock.patch.dict(os.environ, clear=True):
            colors.print_(colors.red("usage:"), file=buffer)
        self.assertEqual("\033[31musage:\033[0m\n", buffer.getvalue())

    def test_no_color(self):
        buffer = FakeTerminal()
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            colors.print_(colors.red("usage:"), file=buffer)
        self.assertEqual("usage:\n", buffer.getvalue())
