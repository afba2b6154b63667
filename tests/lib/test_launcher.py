import os
import unittest
import unittest.mock

from test_utils import editor_env, make_program

from wedit.lib.errors import (
    CommandNotExecutable,
    CommandNotFound,
    LaunchFailure,
    RecursionDetected,
)
from wedit.lib.launcher import (
    RECURSION_GUARD_VAR,
    check_recursion_guard,
    launch,
    resolve_executable,
)


class RecursionGuardTests(unittest.TestCase):
    def test_marker_present(self) -> None:
        with self.assertRaises(RecursionDetected) as cm:
            check_recursion_guard({RECURSION_GUARD_VAR: "1"})
        self.assertEqual(cm.exception.exit_code, 1)

    def test_marker_absent(self) -> None:
        check_recursion_guard({"PATH": "/usr/bin"})


class ResolveExecutableTests(unittest.TestCase):
    """Tests for resolve_executable()."""

    def test_bare_name_on_path(self) -> None:
        with editor_env(("vim",)) as ctx:
            self.assertEqual(resolve_executable("vim", ctx.env), str(ctx.bin_dir / "vim"))

    def test_absolute_path(self) -> None:
        with editor_env() as ctx:
            program = make_program(ctx.base / "opt", "subl")
            self.assertEqual(resolve_executable(str(program), ctx.env), str(program))

    def test_bare_name_missing(self) -> None:
        with editor_env() as ctx:
            with self.assertRaises(CommandNotFound) as cm:
                resolve_executable("code", ctx.env)
            self.assertEqual(cm.exception.exit_code, 127)

    def test_path_missing(self) -> None:
        with editor_env() as ctx:
            with self.assertRaises(CommandNotFound):
                resolve_executable(str(ctx.base / "nope" / "vim"), ctx.env)

    def test_path_not_executable(self) -> None:
        with editor_env() as ctx:
            program = make_program(ctx.base / "opt", "kate", executable=False)
            with self.assertRaises(CommandNotExecutable) as cm:
                resolve_executable(str(program), ctx.env)
            self.assertEqual(cm.exception.exit_code, 126)

    def test_bare_name_only_non_executable_on_path(self) -> None:
        with editor_env() as ctx:
            make_program(ctx.bin_dir, "nano", executable=False)
            with self.assertRaises(CommandNotExecutable):
                resolve_executable("nano", ctx.env)

    def test_directory_is_not_executable(self) -> None:
        with editor_env() as ctx:
            with self.assertRaises(CommandNotExecutable):
                resolve_executable(str(ctx.bin_dir), ctx.env)


class LaunchTests(unittest.TestCase):
    """Tests for launch()."""

    def test_execs_resolved_path_with_files_and_guard(self) -> None:
        with editor_env(("code",)) as ctx:
            with unittest.mock.patch("wedit.lib.launcher.os.execve") as mock_execve:
                launch(["code", "--wait"], ["COMMIT_EDITMSG"], ctx.env)

            path, argv, env = mock_execve.call_args[0]
            resolved = str(ctx.bin_dir / "code")
            self.assertEqual(path, resolved)
            self.assertEqual(argv, [resolved, "--wait", "COMMIT_EDITMSG"])
            self.assertEqual(env[RECURSION_GUARD_VAR], "1")
            self.assertEqual(env["PATH"], ctx.env["PATH"])
            self.assertNotIn(RECURSION_GUARD_VAR, ctx.env)

    def test_not_found_does_not_exec(self) -> None:
        with editor_env() as ctx:
            with unittest.mock.patch("wedit.lib.launcher.os.execve") as mock_execve:
                with self.assertRaises(CommandNotFound):
                    launch(["vim"], ["a.txt"], ctx.env)
            mock_execve.assert_not_called()

    def test_exec_failure_is_classified(self) -> None:
        with editor_env(("vim",)) as ctx:
            with unittest.mock.patch(
                "wedit.lib.launcher.os.execve", side_effect=OSError(8, "Exec format error")
            ):
                with self.assertRaises(LaunchFailure):
                    launch(["vim"], [], ctx.env)

    def test_exec_permission_error(self) -> None:
        with editor_env(("vim",)) as ctx:
            with unittest.mock.patch(
                "wedit.lib.launcher.os.execve", side_effect=PermissionError(13, "denied")
            ):
                with self.assertRaises(CommandNotExecutable):
                    launch(["vim"], [], ctx.env)

    def test_spawns_child_without_exec(self) -> None:
        with editor_env(("vim",)) as ctx:
            with (
                unittest.mock.patch("wedit.lib.launcher.CAN_EXEC", False),
                unittest.mock.patch(
                    "wedit.lib.launcher.subprocess.call", return_value=3
                ) as mock_call,
                unittest.mock.patch("wedit.lib.launcher.os.execve") as mock_execve,
            ):
                with self.assertRaises(SystemExit) as cm:
                    launch(["vim"], ["notes.txt"], ctx.env)

            self.assertEqual(cm.exception.code, 3)
            mock_execve.assert_not_called()
            argv = mock_call.call_args[0][0]
            self.assertEqual(argv, [str(ctx.bin_dir / "vim"), "notes.txt"])
            self.assertEqual(mock_call.call_args[1]["env"][RECURSION_GUARD_VAR], "1")

    def test_defaults_to_process_environment(self) -> None:
        with editor_env(("nano",)) as ctx:
            with (
                unittest.mock.patch.dict(os.environ, {"PATH": ctx.env["PATH"]}),
                unittest.mock.patch("wedit.lib.launcher.os.execve") as mock_execve,
            ):
                launch(["nano"], ["x"])
                self.assertNotIn(RECURSION_GUARD_VAR, os.environ)
            self.assertEqual(mock_execve.call_args[0][1], [str(ctx.bin_dir / "nano"), "x"])


if __name__ == "__main__":
    unittest.main()
