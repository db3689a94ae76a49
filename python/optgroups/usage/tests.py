from expecttest import TestCase

from ..prelude import *

from .usage import UsageError, format_usage, raise_usage, usage_line


class Test(TestCase):
    def test_usage_line(self):
        self.assertEqual("prog [--v]", usage_line("prog", ["[--v]"], 0, 0))
        self.assertEqual("[--v] [<arg>...]", usage_line("", ["[--v]"], 0, None))
        self.assertEqual("prog <arg> [<arg>...]", usage_line("prog", [], 1, None))
        self.assertEqual("prog <arg> <arg> [<arg>]", usage_line("prog", [], 2, 3))
        self.assertEqual("prog [<arg> [<arg>]]", usage_line("prog", [], 0, 2))

    def test_format_usage(self):
        self.assertExpectedInline(
            format_usage(
                ["prog --in <value>", "prog [--help]"], error="unknown option: -x"
            ),
            """\
unknown option: -x
usage: prog --in <value>
       prog [--help]""",
        )
        self.assertExpectedInline(format_usage(["prog"]), """usage: prog""")

    def test_usage_error(self):
        e = UsageError(["test --test"], error="missing required argument: --test")

        self.assertEqual("missing required argument: --test", e.error)
        self.assertEqual(["test --test"], e.lines)
        self.assertEqual("usage: test --test", e.usage)
        self.assertEqual(
            "missing required argument: --test\nusage: test --test", str(e)
        )

    def test_raise_usage(self):
        with self.assertRaises(UsageError) as cm:
            raise_usage("second", "second --all", program="prog")

        self.assertExpectedInline(
            str(cm.exception),
            """\
usage: prog second
       prog second --all""",
        )
        self.assertIsNone(cm.exception.error)
