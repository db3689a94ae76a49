from expecttest import TestCase

from ..option import OptionView
from ..prelude import *
from ..usage import ConfigError, UsageError

from .program import Program


def usage_message(program: Program, argv: List[str]) -> str:
    try:
        program.parse(argv)
    except UsageError as e:
        return str(e)
    else:
        raise AssertionError("expected parse to fail")


class Test(TestCase):
    def test_optional_switch(self):
        calls: List[str] = []
        program = Program("test").optional("--test", lambda: calls.append("test"))

        rest = program.parse(["--test"])
        self.assertEqual(["test"], calls)
        self.assertTrue(rest.empty)
        self.assertEqual(["test [--test]"], program.help())

    def test_required_switch(self):
        calls: List[str] = []
        program = Program("test").required("--test", lambda: calls.append("test"))

        rest = program.parse(["--test"])
        self.assertEqual(["test"], calls)
        self.assertEqual([], rest.to_list())
        self.assertEqual(["test --test"], program.help())

    def test_only_optional_options_and_no_input(self):
        calls: List[str] = []
        program = (
            Program("test")
            .optional("--a", lambda: calls.append("a"))
            .optional("--b", lambda o: calls.append(o.value))
        )

        rest = program.parse([])
        self.assertEqual([], calls)
        self.assertEqual(0, len(rest))

    def test_missing_required_option(self):
        program = Program("test").required("--test", lambda: None)

        self.assertExpectedInline(
            usage_message(program, []),
            """\
missing required argument: --test
usage: test --test""",
        )

    def test_value_option(self):
        for argv in (["--value", "value"], ["--value=value"]):
            values: List[str] = []
            program = Program("test").optional(
                "--value", lambda o: values.append(o.value)
            )

            rest = program.parse(argv)
            self.assertEqual(["value"], values)
            self.assertTrue(rest.empty)

    def test_required_value_option_inline(self):
        values: List[str] = []
        program = Program("test").required("--opt", lambda o: values.append(o.value))

        rest = program.parse(["--opt=value"])
        self.assertEqual(["value"], values)
        self.assertEqual([], rest.to_list())

    def test_inline_value_splits_at_first_equals(self):
        values: List[str] = []
        program = Program().optional("--define", lambda o: values.append(o.value))

        program.parse(["--define=key=value"])
        self.assertEqual(["key=value"], values)

    def test_option_is_passed_to_value_callback(self):
        seen: List[OptionView] = []
        program = Program().optional("--print", seen.append)

        program.parse(["--print", "x"])
        self.assertEqual(1, len(seen))
        self.assertEqual("--print", seen[0].name)
        self.assertEqual("x", seen[0].value)
        self.assertTrue(seen[0].matched)
        self.assertTrue(seen[0].is_value_option)

    def test_verbose_print_and_positional(self):
        verbose = False
        printed: Optional[str] = None

        def set_verbose() -> None:
            nonlocal verbose
            verbose = True

        def set_print(o: OptionView) -> None:
            nonlocal printed
            printed = o.value

        rest = (
            Program("main")
            .optional("--verbose", set_verbose)
            .optional("--print", set_print)
            .args(0)
            .parse(["--verbose", "--print", "x", "extra"])
        )
        self.assertTrue(verbose)
        self.assertEqual("x", printed)
        self.assertEqual(["extra"], rest.to_list())

    def test_value_is_taken_verbatim(self):
        calls: List[str] = []
        program = (
            Program()
            .optional("--verbose", lambda: calls.append("verbose"))
            .optional("--print", lambda o: calls.append(o.value))
        )

        program.parse(["--print", "--verbose"])
        self.assertEqual(["--verbose"], calls)

    def test_unknown_option(self):
        program = Program("test").optional("--test", lambda: None)

        self.assertExpectedInline(
            usage_message(program, ["--bad"]),
            """\
unknown option: --bad
usage: test [--test]""",
        )

    def test_illegal_option_value(self):
        program = Program("test").optional("--verbose", lambda: None)

        self.assertExpectedInline(
            usage_message(program, ["--verbose=yes"]),
            """\
illegal option value: --verbose=yes
usage: test [--verbose]""",
        )

    def test_illegal_option_value_in_second_group(self):
        program = (
            Program("test")
            .optional("--quiet", lambda: None)
            .group()
            .optional("--verbose", lambda: None)
        )

        self.assertExpectedInline(
            usage_message(program, ["--verbose=yes"]),
            """\
unknown option: --verbose=yes
usage: test [--quiet]
       test [--verbose]""",
        )
        self.assertEqual(
            ["unknown option: --verbose=yes", "illegal option value: --verbose=yes"],
            program.errors,
        )

    def test_missing_option_value(self):
        program = Program("test").optional("--print", lambda o: None)

        self.assertExpectedInline(
            usage_message(program, ["--print"]),
            """\
missing option value: --print
usage: test [--print <value>]""",
        )

    def test_end_of_options(self):
        calls: List[str] = []
        program = (
            Program().optional("--verbose", lambda: calls.append("verbose")).args(0)
        )

        rest = program.parse(["--", "--verbose", "x"])
        self.assertEqual([], calls)
        self.assertEqual(["--verbose", "x"], rest.to_list())

    def test_first_positional_ends_options(self):
        calls: List[str] = []
        program = (
            Program().optional("--verbose", lambda: calls.append("verbose")).args(0)
        )

        rest = program.parse(["x", "--verbose"])
        self.assertEqual([], calls)
        self.assertEqual(["x", "--verbose"], rest.to_list())

    def test_fallback_to_next_group(self):
        calls: List[str] = []
        program = (
            Program("prog")
            .required("--a", lambda: calls.append("a"))
            .group()
            .optional("--b", lambda: calls.append("b"))
        )

        program.parse(["--b"])
        self.assertEqual(["b"], calls)
        self.assertEqual(["unknown option: --b"], program.errors)

    def test_callbacks_only_run_for_the_matching_group(self):
        calls: List[str] = []
        program = (
            Program("prog")
            .optional("--a", lambda: calls.append("a1"))
            .required("--b", lambda: calls.append("b"))
            .group()
            .optional("--a", lambda: calls.append("a2"))
        )

        program.parse(["--a"])
        self.assertEqual(["a2"], calls)

    def test_callbacks_run_in_command_line_order(self):
        calls: List[str] = []
        program = (
            Program()
            .optional("--a", lambda: calls.append("a"))
            .optional("--b", lambda: calls.append("b"))
            .optional("--c", lambda o: calls.append("c=" + o.value))
        )

        program.parse(["--c", "1", "--b", "--a"])
        self.assertEqual(["c=1", "b", "a"], calls)

    def test_repeated_value_option(self):
        values: List[str] = []
        program = Program().optional("--tag", lambda o: values.append(o.value))

        program.parse(["--tag", "x", "--tag=y"])
        self.assertEqual(["x", "y"], values)

    def test_no_group_matches(self):
        program = (
            Program("prog")
            .required("--in", lambda o: None)
            .args(1)
            .optional("--help", lambda: None)
        )

        self.assertExpectedInline(
            usage_message(program, ["--out"]),
            """\
unknown option: --out
usage: prog --in <value> <arg> [<arg>...]
       prog [--help]""",
        )

    def test_wrong_argument_count_is_not_retried(self):
        calls: List[str] = []
        program = (
            Program("prog")
            .optional("--verbose", lambda: calls.append("verbose"))
            .args(1, 1)
            .optional("--help", lambda: calls.append("help"))
        )

        self.assertExpectedInline(
            usage_message(program, ["--verbose"]),
            """\
usage: prog [--verbose] <arg>
       prog [--help]""",
        )
        # the second group would accept an empty command line
        self.assertExpectedInline(
            usage_message(program, []),
            """\
usage: prog [--verbose] <arg>
       prog [--help]""",
        )
        self.assertEqual([], calls)

    def test_wrong_argument_count_ignores_earlier_errors(self):
        program = (
            Program("prog")
            .required("--a", lambda: None)
            .group()
            .optional("--b", lambda: None)
            .args(0, 1)
        )

        self.assertExpectedInline(
            usage_message(program, ["--b", "x", "y"]),
            """\
usage: prog --a
       prog [--b] [<arg>]""",
        )
        self.assertEqual(["unknown option: --b"], program.errors)

    def test_no_positional_arguments_by_default(self):
        program = Program("prog").optional("--x", lambda: None)

        self.assertExpectedInline(
            usage_message(program, ["a"]),
            """usage: prog [--x]""",
        )

    def test_reused_program_does_not_keep_matches(self):
        calls: List[str] = []
        program = Program("prog").required("--x", lambda: calls.append("x"))

        program.parse(["--x"])
        self.assertExpectedInline(
            usage_message(program, []),
            """\
missing required argument: --x
usage: prog --x""",
        )
        self.assertEqual(["x"], calls)

    def test_usage_from_callback(self):
        program = Program("prog")
        program.optional("--help", program.usage).optional("--verbose", lambda: None)

        self.assertExpectedInline(
            usage_message(program, ["--help"]),
            """usage: prog [--help] [--verbose]""",
        )

    def test_help_in_second_group(self):
        program = Program("prog")
        program.required("--in", lambda o: None).args(1)
        program.optional("--help", program.usage)

        with self.assertRaises(UsageError) as cm:
            program.parse(["--help"])

        self.assertIsNone(cm.exception.error)
        self.assertExpectedInline(
            str(cm.exception),
            """\
usage: prog --in <value> <arg> [<arg>...]
       prog [--help]""",
        )
        self.assertEqual(["unknown option: --help"], program.errors)

    def test_help_positional_notation(self):
        def line(min_args: Optional[int], max_args: Optional[int] = None) -> str:
            (text,) = Program("p").args(min_args, max_args).help()
            return text

        self.assertEqual("p", line(None))
        self.assertEqual("p [<arg>...]", line(0))
        self.assertEqual("p <arg> [<arg>...]", line(1))
        self.assertEqual("p <arg> <arg> [<arg>]", line(2, 3))
        self.assertEqual("p <arg>", line(1, 1))
        self.assertEqual("p [<arg> [<arg> [<arg>]]]", line(0, 3))

    def test_help_sorts_options(self):
        program = (
            Program("prog")
            .optional("--zeta", lambda: None)
            .required("--alpha", lambda o: None)
            .args(1, 2)
            .optional("--help", lambda: None)
        )

        self.assertExpectedInline(
            "\n".join(program.help()),
            """\
prog --alpha <value> [--zeta] <arg> [<arg>]
prog [--help]""",
        )

    def test_parse_from_offset(self):
        program = Program().optional("--v", lambda: None).args(0)

        rest = program.parse(["cmd", "--v", "a", "b"], 1)
        self.assertEqual(2, rest.start)
        self.assertEqual(2, len(rest))
        self.assertEqual("a", rest[0])
        self.assertEqual("b", rest[-1])
        with self.assertRaises(IndexError):
            rest[2]

    def test_args_does_not_add_an_empty_group(self):
        program = Program("prog").optional("--v", lambda: None).args(0)

        program.parse([])
        self.assertEqual(["prog [--v] [<arg>...]"], program.help())

    def test_config_errors(self):
        with self.assertRaisesRegex(ConfigError, "without a minimum"):
            Program().args(None, 2)

        with self.assertRaisesRegex(ConfigError, "exceeds the maximum"):
            Program().args(3, 1)

        with self.assertRaisesRegex(ConfigError, "is negative"):
            Program().args(-1)

        with self.assertRaisesRegex(ConfigError, "duplicate option"):
            Program().optional("--x", lambda: None).required("--x", lambda: None)

        with self.assertRaisesRegex(ConfigError, "zero or one arguments"):
            Program().optional("--x", lambda a, b: None)

    def test_same_option_in_two_groups(self):
        values: List[str] = []
        program = (
            Program()
            .required("--x", lambda o: values.append("1:" + o.value))
            .required("--y", lambda: None)
            .group()
            .optional("--x", lambda o: values.append("2:" + o.value))
        )

        program.parse(["--x", "v"])
        self.assertEqual(["2:v"], values)
