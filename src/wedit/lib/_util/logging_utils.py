# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic output for wedit.

Advisory messages go to stderr only when stderr is a terminal, so piping
wedit (or running it under git) never mixes them into captured output.
Fatal messages are always printed.
"""

import os
import sys
import time

PROGRAM = "wedit"


def log(message: str) -> None:
    """Print an advisory ``wedit: <message>`` line when stderr is a TTY."""
    if sys.stderr.isatty():
        print(f"{PROGRAM}: {message}", file=sys.stderr)
    _log_debug(message)


def fatal_message(message: str) -> None:
    """Print a ``wedit: <message>`` line to stderr unconditionally."""
    print(f"{PROGRAM}: {message}", file=sys.stderr)
    _log_debug(f"fatal: {message}")


def _log_debug(message: str) -> None:
    """Append a timestamped line to ``state_root()/wedit.log``.

    Only active when ``WEDIT_DEBUG`` is set. Any IO error is ignored so this
    never affects the editor launch.
    """
    if not os.environ.get("WEDIT_DEBUG"):
        return
    try:
        from ..core.paths import state_root

        log_path = state_root() / "wedit.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] [{os.getpid()}] {message}\n")
    except OSError:
        pass
