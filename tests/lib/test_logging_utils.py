import os
import tempfile
import unittest
import unittest.mock
from contextlib import redirect_stderr
from io import StringIO
from pathlib import Path

from wedit.lib._util.logging_utils import _log_debug, fatal_message, log


class _TtyStringIO(StringIO):
    def isatty(self) -> bool:
        return True


class LogTests(unittest.TestCase):
    """Tests for the stderr diagnostics."""

    def test_log_printed_on_tty(self) -> None:
        err = _TtyStringIO()
        with redirect_stderr(err):
            log("Using editor from $VISUAL: code")
        self.assertEqual(err.getvalue(), "wedit: Using editor from $VISUAL: code\n")

    def test_log_suppressed_when_redirected(self) -> None:
        err = StringIO()
        with redirect_stderr(err):
            log("hidden")
        self.assertEqual(err.getvalue(), "")

    def test_fatal_always_printed(self) -> None:
        err = StringIO()
        with redirect_stderr(err):
            fatal_message("No suitable editor found.")
        self.assertEqual(err.getvalue(), "wedit: No suitable editor found.\n")


class DebugLogTests(unittest.TestCase):
    """Tests for _log_debug()."""

    def test_disabled_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            env = {"WEDIT_STATE_DIR": td}
            with unittest.mock.patch.dict(os.environ, env):
                os.environ.pop("WEDIT_DEBUG", None)
                _log_debug("nothing")
            self.assertFalse((Path(td) / "wedit.log").exists())

    def test_appends_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            state = Path(td) / "state"
            env = {"WEDIT_STATE_DIR": str(state), "WEDIT_DEBUG": "1"}
            with unittest.mock.patch.dict(os.environ, env):
                _log_debug("first")
                _log_debug("second")
            lines = (state / "wedit.log").read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            self.assertTrue(lines[0].endswith("first"))
            self.assertTrue(lines[1].endswith("second"))

    def test_io_errors_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "file"
            blocker.write_text("", encoding="utf-8")
            env = {"WEDIT_STATE_DIR": str(blocker / "state"), "WEDIT_DEBUG": "1"}
            with unittest.mock.patch.dict(os.environ, env):
                _log_debug("ignored")


if __name__ == "__main__":
    unittest.main()
