import contextlib
import io
import logging
from unittest import mock

from expecttest import TestCase

from ..option import OptionView
from ..prelude import *
from ..program import Program
from ..usage import UsageError

from .dispatch import dispatch, log_level, program_name


def make_main(result: Dict[str, Any]) -> Callable[[List[str]], Any]:
    def set_verbose() -> None:
        result["verbose"] = True

    def set_print(o: OptionView) -> None:
        result["print"] = o.value

    def main(args: List[str]) -> Any:
        rest = (
            Program("main")
            .optional("--verbose", set_verbose)
            .optional("--print", set_print)
            .args(0)
            .parse(args)
        )
        result["args"] = rest.to_list()
        return result

    return main


class Test(TestCase):
    def test_dispatch(self):
        result = dispatch(
            make_main({}), argv=["/usr/bin/main", "--verbose", "--print", "x", "extra"]
        )
        self.assertEqual({"verbose": True, "print": "x", "args": ["extra"]}, result)

    def test_dispatch_usage_error(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                dispatch(make_main({}), argv=["main", "--bogus"])

        self.assertEqual(1, cm.exception.code)
        self.assertExpectedInline(
            stderr.getvalue(),
            """\
error: unknown option: --bogus
usage: main [--print <value>] [--verbose] [<arg>...]
""",
        )

    def test_dispatch_without_bail(self):
        with self.assertRaisesRegex(UsageError, "unknown option: --bogus"):
            dispatch(make_main({}), argv=["main", "--bogus"], bail_on_error=False)

    def test_log_init(self):
        levels: List[int] = []
        with mock.patch.dict(os.environ, {"OPTGROUPS_LOG_LEVEL": "debug"}):
            dispatch(make_main({}), argv=["main"], log_init=levels.append)
        self.assertEqual([logging.DEBUG], levels)

    def test_log_level(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(logging.WARN, log_level())

        with mock.patch.dict(os.environ, {"OPTGROUPS_LOG_LEVEL": "Info"}):
            self.assertEqual(logging.INFO, log_level())

        with mock.patch.dict(os.environ, {"OPTGROUPS_LOG_LEVEL": "loud"}):
            with self.assertRaisesRegex(KgError, "unknown log level"):
                log_level()

    def test_program_name(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual("main", program_name(["/usr/local/bin/main"]))

        with mock.patch.dict(os.environ, {"OPTGROUPS_PROGRAM_NAME": "kg main"}):
            self.assertEqual("kg main", program_name(["/usr/local/bin/main"]))

    def test_dispatch_config_error(self):
        def main(args: List[str]) -> Any:
            return Program().optional("--x", lambda: None).optional("--x", lambda: None)

        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                dispatch(main, argv=["main"])

        self.assertEqual(1, cm.exception.code)
        output = stderr.getvalue()
        self.assertIn("The command failed due to a Python exception.", output)
        self.assertIn("  duplicate option in group\n    name: '--x'", output)
