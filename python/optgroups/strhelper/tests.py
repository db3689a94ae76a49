import unittest

from ..prelude import *

from .strhelper import basename, numeric_range, split_string


class Test(unittest.TestCase):
    def test_split_string(self):
        self.assertEqual(["a", "b", "c"], split_string("a,,b,c,", ","))
        self.assertEqual(
            ["a", "", "b", "c", ""], split_string("a,,b,c,", ",", include_empties=True)
        )
        self.assertEqual([], split_string("", ","))
        self.assertEqual([""], split_string("", ",", include_empties=True))

    def test_numeric_range(self):
        self.assertEqual({0, 1, 2, 3, 4, 5}, numeric_range("1,3-5,-2", 0, 10))
        self.assertEqual({8, 9, 10}, numeric_range("8-", 0, 10))
        self.assertEqual({7}, numeric_range("7", 0, 10))
        self.assertEqual(set(), numeric_range("5-3", 0, 10))
        self.assertEqual(set(), numeric_range("", 0, 10))

    def test_numeric_range_errors(self):
        with self.assertRaisesRegex(KgError, "bad range"):
            numeric_range("1-2-3", 0, 10)

        with self.assertRaisesRegex(KgError, "bad number in range"):
            numeric_range("1,x", 0, 10)

    def test_basename(self):
        self.assertEqual("prog", basename("/usr/local/bin/prog"))
        self.assertEqual("prog", basename("prog"))
        self.assertEqual("bin", basename("/usr/bin/"))
        self.assertEqual("/", basename("/"))
