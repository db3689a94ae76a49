import unittest

from ..prelude import *
from ..usage import ConfigError

from .option import ArgRange, Option, OptionView, Switch, Valued, as_callback


class Test(unittest.TestCase):
    def test_as_callback(self):
        def switch() -> None:
            pass

        def valued(option: Option) -> None:
            pass

        def valued_with_default(option: Option, verbose: bool = False) -> None:
            pass

        self.assertEqual(Switch(switch), as_callback(switch))
        self.assertEqual(Valued(valued), as_callback(valued))
        self.assertEqual(Valued(valued_with_default), as_callback(valued_with_default))
        self.assertEqual(Switch(valued), as_callback(Switch(valued)))

        with self.assertRaisesRegex(ConfigError, "zero or one arguments"):
            as_callback(lambda a, b: None)

        with self.assertRaisesRegex(ConfigError, "not callable"):
            as_callback("--verbose")

    def test_help_fragment(self):
        def fragment(required: bool, f: Any) -> str:
            return Option("--name", required, as_callback(f)).help_fragment()

        self.assertEqual("--name", fragment(True, lambda: None))
        self.assertEqual("--name <value>", fragment(True, lambda o: None))
        self.assertEqual("[--name]", fragment(False, lambda: None))
        self.assertEqual("[--name <value>]", fragment(False, lambda o: None))

    def test_exec(self):
        calls: List[str] = []
        switch = Option("--verbose", False, Switch(lambda: calls.append("verbose")))
        valued = Option("--print", False, Valued(lambda o: calls.append(o.value)))
        valued.value = "x"

        switch.exec()
        valued.exec()
        self.assertEqual(["verbose", "x"], calls)
        self.assertFalse(switch.is_value_option)
        self.assertTrue(valued.is_value_option)

    def test_value_callback_gets_read_only_view(self):
        seen: List[OptionView] = []
        option = Option("--print", True, Valued(seen.append))
        option.matched = True
        option.value = "x"

        option.exec()
        self.assertEqual(
            [
                OptionView(
                    "--print", True, is_value_option=True, matched=True, value="x"
                )
            ],
            seen,
        )
        with self.assertRaises(dataclasses.FrozenInstanceError):
            seen[0].value = "y"  # type: ignore

        # the kind of an option is fixed when it is created
        with self.assertRaises(AttributeError):
            option.callback = Switch(lambda: None)  # type: ignore
        with self.assertRaises(AttributeError):
            option.name = "--other"  # type: ignore
        self.assertTrue(option.is_value_option)

    def test_reset(self):
        option = Option("--print", False, Valued(lambda o: None))
        option.matched = True
        option.value = "x"

        option.reset()
        self.assertFalse(option.matched)
        self.assertEqual("", option.value)

    def test_arg_range(self):
        argv = ["prog", "--verbose", "a", "b"]
        rest = ArgRange(argv, 2, 4)

        self.assertEqual(["a", "b"], rest.to_list())
        self.assertEqual(["a", "b"], list(rest))
        self.assertEqual(2, len(rest))
        self.assertEqual("b", rest[-1])
        self.assertFalse(rest.empty)
        self.assertTrue(ArgRange(argv, 4, 4).empty)
