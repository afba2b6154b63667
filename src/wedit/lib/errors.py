# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for wedit.

Every class carries the process exit status the CLI uses when the error
reaches it. Detectors and the selector never raise these; they return
``None`` and let the CLI pick the next fallback.
"""


class WeditError(Exception):
    """Base class for errors that terminate the process."""

    exit_code = 1


class NoEditorFound(WeditError):
    """Every detection strategy and fallback was exhausted."""


class RecursionDetected(WeditError):
    """The recursion guard marker was present at startup."""


class UnknownOption(WeditError):
    """The command line contained an unrecognized option."""

    exit_code = 2


class CommandNotExecutable(WeditError):
    """The resolved editor path exists but lacks execute permission."""

    exit_code = 126


class CommandNotFound(WeditError):
    """The editor command could not be resolved to a path."""

    exit_code = 127


class ConfigWriteFailure(WeditError):
    """The interactive selection could not be persisted."""


class InternalInvariantViolation(WeditError):
    """A state the control flow should make impossible was reached."""


class LaunchFailure(WeditError):
    """The operating system refused to start the editor."""
