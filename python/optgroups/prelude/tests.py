import unittest

from . import KgError, pluralize


class Test(unittest.TestCase):
    def test_kg_error(self):
        e = KgError("duplicate option in group", name="--verbose")
        self.assertEqual("duplicate option in group (name='--verbose')", str(e))
        self.assertEqual(
            "duplicate option in group\n  name: '--verbose'", e.to_human_str()
        )
        self.assertEqual("bad range", str(KgError("bad range")))

    def test_pluralize(self):
        self.assertEqual("1 argument", pluralize(1, "argument"))
        self.assertEqual("0 arguments", pluralize(0, "argument"))
        self.assertEqual("1,000 arguments", pluralize(1000, "argument"))
