from expecttest import TestCase

from ..option import ArgRange
from ..prelude import *
from ..program import Program
from ..usage import ConfigError, UsageError

from .commands import Commands


@dataclass
class Context:
    selected: str = ""
    verbose: bool = False
    rest: List[str] = dataclasses.field(default_factory=list)


def make_commands(program: str = "") -> Commands[Context]:
    def select(name: str) -> Callable[[Context, ArgRange], None]:
        def handler(context: Context, rest: ArgRange) -> None:
            context.selected = name
            context.rest = rest.to_list()

        return handler

    commands: Commands[Context] = Commands(program)
    for name in ("test0", "test1", "test2", "test3"):
        commands.command(name, select(name))
    return commands


class Test(TestCase):
    def test_lookup(self):
        commands = make_commands("test")
        for name in commands.names():
            context = Context()
            commands.parse(context, [name])
            self.assertEqual(name, context.selected)
            self.assertEqual([], context.rest)

    def test_rest_is_passed_to_handler(self):
        context = Context()
        make_commands().parse(context, ["prog", "test2", "a", "--b"], 1)
        self.assertEqual("test2", context.selected)
        self.assertEqual(["a", "--b"], context.rest)

    def test_unknown_command(self):
        with self.assertRaises(UsageError) as cm:
            make_commands("test").parse(Context(), ["test_x"])

        self.assertExpectedInline(
            str(cm.exception),
            """\
usage: test test0
       test test1
       test test2
       test test3""",
        )

    def test_unknown_command_without_program_name(self):
        with self.assertRaises(UsageError) as cm:
            make_commands().parse(Context(), ["test_x"])

        self.assertExpectedInline(
            str(cm.exception),
            """\
usage: test0
       test1
       test2
       test3""",
        )

    def test_no_command(self):
        with self.assertRaises(UsageError):
            make_commands("test").parse(Context(), [])

    def test_duplicate_command(self):
        with self.assertRaisesRegex(ConfigError, "duplicate command"):
            make_commands().command("test0", lambda context, rest: None)

    def test_command_with_program(self):
        def main_first(context: Context, rest: ArgRange) -> None:
            def set_verbose() -> None:
                context.verbose = True

            leftover = (
                Program("prog first")
                .optional("--verbose", set_verbose)
                .args(0)
                .parse(rest.argv, rest.start)
            )
            context.selected = "first"
            context.rest = leftover.to_list()

        commands: Commands[Context] = Commands("prog")
        commands.command("first", main_first)

        context = Context()
        commands.parse(context, ["first", "--verbose", "x"])
        self.assertEqual(Context(selected="first", verbose=True, rest=["x"]), context)

        with self.assertRaises(UsageError) as cm:
            commands.parse(Context(), ["first", "--quiet"])

        self.assertExpectedInline(
            str(cm.exception),
            """\
unknown option: --quiet
usage: prog first [--verbose] [<arg>...]""",
        )
