# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Build the editor argument vector, adding a wait flag where needed."""

from collections.abc import Sequence

from . import registry
from ._util.logging_utils import log
from .registry import Category


def build_command(
    short_name: str,
    executable: str,
    initial_args: Sequence[str] = (),
    no_wait: bool = False,
    force_wait: bool = False,
) -> list[str]:
    """Return ``[executable, *initial_args]`` plus the editor's wait flag if it needs one.

    Graphical editors get their registered wait flag appended after the
    initial arguments unless the exact same string is already there.
    Terminal editors block on their own and never get a flag. ``no_wait``
    suppresses the flag for every editor. ``force_wait`` does not change the
    result; the graphical path already adds the flag whenever one exists.

    Editors missing from the registry are treated as terminal editors.
    """
    spec = registry.lookup(short_name) or registry.UNKNOWN_EDITOR
    argv = [executable, *initial_args]
    wait_flag = ""

    if no_wait:
        log(f"Explicit --no-wait: No wait flag will be added for '{short_name}'.")
    elif spec.category is Category.GRAPHICAL and spec.wait_flag:
        if spec.wait_flag in initial_args:
            log(
                f"Wait flag '{spec.wait_flag}' for '{short_name}' is already present "
                "in initial arguments."
            )
        else:
            wait_flag = spec.wait_flag
        if force_wait and not wait_flag:
            log(f"Flag --wait active: wait flag for '{short_name}' is already in place.")
    elif spec.category is Category.TERMINAL:
        log(f"Terminal editor '{short_name}' blocks by default. No wait flag needed.")

    if wait_flag:
        argv.append(wait_flag)
        log(f"Added wait flag '{wait_flag}' for '{short_name}'.")
    return argv
