# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Hand the process over to the editor."""

import os
import signal
import subprocess
from collections.abc import Mapping, Sequence
from typing import NoReturn

from ._util.logging_utils import log
from .detectors import which
from .errors import CommandNotExecutable, CommandNotFound, LaunchFailure, RecursionDetected

RECURSION_GUARD_VAR = "__wedit_INVOKED"

# Windows has no exec that keeps the process id; the editor runs as a child there.
CAN_EXEC = os.name != "nt"


def check_recursion_guard(environ: Mapping[str, str]) -> None:
    """Raise RecursionDetected if wedit is being run as its own editor."""
    if environ.get(RECURSION_GUARD_VAR):
        raise RecursionDetected(
            "Recursive call to wedit detected. Aborting to prevent infinite loop."
        )


def _is_executable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _find_non_executable(name: str, environ: Mapping[str, str]) -> str | None:
    """Return the first PATH entry holding a file called *name*, executable or not."""
    for directory in environ.get("PATH", os.defpath).split(os.pathsep):
        candidate = os.path.join(directory or os.curdir, name)
        if os.path.isfile(candidate):
            return candidate
    return None


def resolve_executable(command: str, environ: Mapping[str, str]) -> str:
    """Return the absolute path of the executable *command* refers to.

    Names containing a path separator are checked directly; bare names are
    looked up on PATH. Raises CommandNotFound or CommandNotExecutable.
    """
    if os.sep in command or (os.altsep and os.altsep in command):
        if not os.path.exists(command):
            raise CommandNotFound(
                f"Editor command '{command}' not found or is not a valid command. "
                "Please check your configuration."
            )
        resolved = os.path.abspath(command)
    else:
        found = which(command, environ)
        if found is None:
            found = _find_non_executable(command, environ)
            if found is None:
                raise CommandNotFound(
                    f"Editor command '{command}' not found or is not a valid command. "
                    "Please check your configuration."
                )
        resolved = os.path.abspath(found)

    if not _is_executable_file(resolved):
        raise CommandNotExecutable(
            f"Editor command '{resolved}' (resolved from '{command}') is not executable. "
            "Please check permissions or configuration."
        )
    return resolved


def _spawn_and_wait(argv: list[str], env: dict[str, str]) -> NoReturn:
    """Run the editor as a child and exit with its status.

    Used where the OS cannot replace the running process image. Ctrl+C is left
    to the editor, which shares the console.
    """
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = subprocess.call(argv, env=env)  # noqa: S603
    finally:
        signal.signal(signal.SIGINT, previous)
    raise SystemExit(returncode)


def launch(
    argv: Sequence[str], files: Sequence[str], environ: Mapping[str, str] | None = None
) -> NoReturn:
    """Replace the current process with ``argv + files``.

    ``argv[0]`` is resolved to an absolute path first so the exec does not
    repeat the PATH lookup. The child environment carries the recursion guard.
    """
    env = dict(os.environ if environ is None else environ)
    cmd = list(argv)
    cmd[0] = resolve_executable(cmd[0], env)
    cmd.extend(files)

    env[RECURSION_GUARD_VAR] = "1"
    log(f"Executing: {' '.join(cmd)}")

    if not CAN_EXEC:
        _spawn_and_wait(cmd, env)
    try:
        os.execve(cmd[0], cmd, env)
    except FileNotFoundError as e:
        raise CommandNotFound(f"Editor command '{cmd[0]}' disappeared before launch: {e}") from e
    except PermissionError as e:
        raise CommandNotExecutable(f"Editor command '{cmd[0]}' could not be executed: {e}") from e
    except OSError as e:
        raise LaunchFailure(f"Failed to launch '{cmd[0]}': {e}") from e
