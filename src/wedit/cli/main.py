#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import os
import sys
from collections.abc import Mapping, Sequence

import argcomplete

from .. import __version__
from ..lib._util.logging_utils import fatal_message, log
from ..lib.command import build_command
from ..lib.core.paths import config_search_paths, primary_config_file
from ..lib.detectors import ResolvedEditor, which
from ..lib.errors import (
    ConfigWriteFailure,
    InternalInvariantViolation,
    NoEditorFound,
    UnknownOption,
    WeditError,
)
from ..lib.launcher import check_recursion_guard, launch
from ..lib.resolver import resolve
from ..lib.selector import list_editors, select_editor

# Tried in order when nothing else produced an editor.
LAST_RESORT_EDITORS = ("vi", "nano")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad options through UnknownOption."""

    def error(self, message: str):
        raise UnknownOption(message)


def _build_parser(environ: Mapping[str, str]) -> argparse.ArgumentParser:
    config_file = primary_config_file(environ)
    parser = _ArgumentParser(
        prog="wedit",
        usage="%(prog)s [options] [--] <file> [<file>...]",
        description="Open files in your preferred editor and wait until editing is done.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog=(
            "The editor is chosen based on the following hierarchy:\n"
            "  1. $VISUAL environment variable.\n"
            "  2. $EDITOR environment variable.\n"
            f"  3. User configuration file ('{config_file}' or, if not found,\n"
            "     the legacy '~/.selected_editor').\n"
            "  4. System 'editor' alternative (via update-alternatives on Linux).\n"
            "  5. First available editor from a built-in list of known editors.\n"
            "  6. Interactive prompt (if no editor is found and no configuration exists yet).\n"
            "  7. Fallback to 'vi' or 'nano' if available.\n"
            "  8. Error if no editor can be found.\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"wedit {__version__}")
    parser.add_argument(
        "-c",
        "--config",
        action="store_true",
        help=(
            f"Configure the preferred editor interactively and save it to '{config_file}', "
            "then open that file with the chosen editor."
        ),
    )
    parser.add_argument(
        "-l", "--list", action="store_true", help="List known editors and their detection status."
    )
    parser.add_argument(
        "-n",
        "--no-wait",
        action="store_true",
        help="Do not add wait flags for graphical editors.",
    )
    parser.add_argument(
        "-w",
        "--wait",
        action="store_true",
        help=(
            "Force waiting behavior (already the default for graphical editors with a wait "
            "flag and for all terminal editors)."
        ),
    )
    parser.add_argument("files", nargs="*", metavar="file", help="Files to open in the editor.")
    return parser


def _parse_args(
    parser: argparse.ArgumentParser, argv: Sequence[str]
) -> tuple[argparse.Namespace, list[str]]:
    """Parse *argv*, treating everything after ``--`` as file names."""
    argv = list(argv)
    literal: list[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, literal = argv[:split], argv[split + 1 :]
    args = parser.parse_intermixed_args(argv)
    # argparse lets "-", "-1" and "-x y" through as positionals.
    dashed = [name for name in args.files if name.startswith("-")]
    if dashed:
        raise UnknownOption(f"unrecognized arguments: {' '.join(dashed)}")
    return args, [*args.files, *literal]


def _configure(environ: Mapping[str, str]) -> tuple[ResolvedEditor, list[str]] | None:
    """Run the selector for ``--config``; the config file becomes the file to edit."""
    config_file = primary_config_file(environ)
    selected = select_editor(
        f"Configuring preferred editor. This choice will be saved to '{config_file}'.",
        environ,
        config_file,
    )
    if selected is None:
        log("Configuration cancelled by user.")
        return None

    try:
        config_file.touch(exist_ok=True)
    except OSError as e:
        raise ConfigWriteFailure(f"Could not create config file: {config_file}") from e
    log(f"Opening config file '{config_file}' with newly selected editor '{selected}'.")
    return ResolvedEditor.from_parts([selected], source="interactive selection"), [str(config_file)]


def _last_resort(environ: Mapping[str, str]) -> ResolvedEditor | None:
    for editor_id in LAST_RESORT_EDITORS:
        if which(editor_id, environ):
            log(f"Falling back to '{editor_id}'.")
            return ResolvedEditor.from_parts([editor_id], source="fallback")
    return None


def _choose_editor(environ: Mapping[str, str]) -> ResolvedEditor:
    """Resolve an editor, prompting on first run and falling back to vi/nano."""
    resolved = resolve(environ)
    if resolved is not None:
        return resolved

    if not any(path.is_file() for path in config_search_paths(environ)):
        log("No editor found through standard detection and no user configuration exists.")
        selected = select_editor("No editor configured. Please select one for future use:", environ)
        if selected is not None:
            return ResolvedEditor.from_parts([selected], source="interactive selection")
        log("Interactive selection cancelled.")

    log("No editor determined. Attempting final fallbacks (vi, nano).")
    resolved = _last_resort(environ)
    if resolved is None:
        raise NoEditorFound(
            "No suitable editor found. Please configure one or install a supported editor."
        )
    return resolved


def run(argv: Sequence[str], environ: Mapping[str, str]) -> None:
    """Parse *argv* and either list editors, configure, or exec the editor."""
    # Before anything else: wedit must not end up launching itself.
    check_recursion_guard(environ)

    parser = _build_parser(environ)
    argcomplete.autocomplete(parser)
    args, files = _parse_args(parser, argv)

    if args.list:
        list_editors(environ)
        return

    if args.config:
        configured = _configure(environ)
        if configured is None:
            return
        editor, files = configured
    else:
        if not files:
            parser.print_help()
            return
        editor = _choose_editor(environ)

    if not editor.executable:
        raise InternalInvariantViolation("Internal error: Editor command parts not determined.")

    command = build_command(
        editor.short_name,
        editor.executable,
        editor.initial_args,
        no_wait=args.no_wait,
        force_wait=args.wait,
    )
    launch(command, files, environ)


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ

    try:
        run(argv, environ)
    except WeditError as e:
        fatal_message(str(e))
        raise SystemExit(e.exit_code) from e


if __name__ == "__main__":
    main()
