# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Interactive editor selection and the ``--list`` report."""

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from . import registry
from ._util.ansi import gray, green, red, supports_color
from ._util.logging_utils import _log_debug
from .core.paths import primary_config_file
from .detectors import installed_ids, which
from .errors import ConfigWriteFailure
from .registry import Category


def _prompt_choice(count: int) -> int | None:
    """Read a number in ``0..count``, asking again until one is given.

    Returns ``None`` on EOF or Ctrl+C.
    """
    while True:
        try:
            answer = input(f"Enter number (0-{count}): ").strip()
        except (KeyboardInterrupt, EOFError):
            print()
            return None
        if answer.isascii() and answer.isdecimal() and 0 <= int(answer) <= count:
            return int(answer)
        print(f"Invalid input. Please enter a number between 0 and {count}.", file=sys.stderr)


def save_selection(editor_id: str, config_file: Path) -> None:
    """Overwrite *config_file* with ``SELECTED_EDITOR="<editor_id>"``.

    Raises ConfigWriteFailure if the file or its parent directory cannot be
    written.
    """
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(f'SELECTED_EDITOR="{editor_id}"\n', encoding="utf-8")
    except OSError as e:
        raise ConfigWriteFailure(f"Could not write to config file '{config_file}': {e}") from e


def select_editor(
    header: str = "",
    environ: Mapping[str, str] | None = None,
    config_file: Path | None = None,
) -> str | None:
    """Let the user pick one of the installed registry editors and save it.

    Returns the chosen id, or ``None`` when nothing is installed, the user
    cancels, or the choice could not be written.
    """
    if config_file is None:
        config_file = primary_config_file(environ)
    if header:
        print(header)

    available = installed_ids(environ)
    if not available:
        print(
            "No known editors detected in your PATH. Cannot offer interactive selection.",
            file=sys.stderr,
        )
        print(
            "Please install one of the supported editors or configure one manually "
            f"in '{config_file}'.",
            file=sys.stderr,
        )
        return None

    print("Please select your preferred editor:")
    for i, editor_id in enumerate(available, 1):
        spec = registry.lookup(editor_id)
        display_name = spec.display_name if spec else editor_id
        print(f"  {i}. {editor_id} ({display_name})")
    print("  0. Cancel")

    choice = _prompt_choice(len(available))
    if not choice:
        print("Selection cancelled.", file=sys.stderr)
        _log_debug("interactive selection cancelled")
        return None

    selected = available[choice - 1]
    try:
        save_selection(selected, config_file)
    except ConfigWriteFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        _log_debug(f"config write failure: {e}")
        return None

    print(f"Selected editor '{selected}' saved to '{config_file}'.", file=sys.stderr)
    return selected


def _wait_info(spec: registry.EditorSpec) -> str:
    if spec.wait_flag:
        return f"Wait flag: {spec.wait_flag}"
    if spec.category is Category.TERMINAL:
        return "Blocks by default"
    return "No specific wait flag defined"


def list_editors(environ: Mapping[str, str] | None = None, stream: TextIO | None = None) -> None:
    """Print every registry editor with its category and detection status."""
    out = sys.stdout if stream is None else stream
    color_enabled = supports_color(out)

    print("Known editors and their status:", file=out)
    for editor_id in registry.ordered_ids():
        spec = registry.lookup(editor_id)
        path = which(editor_id, environ)
        if path:
            status = green(f"Detected: {path}", color_enabled)
        else:
            status = red("Not found", color_enabled)
        print(
            f"  {editor_id:<12} ({spec.category.value:<9}) [{status}] "
            f"{gray(_wait_info(spec), color_enabled)}",
            file=out,
        )
