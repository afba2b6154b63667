# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Independent strategies that each try to name an editor.

Every detector takes the environment mapping explicitly, only reads from the
environment and the filesystem, and returns ``None`` when it has nothing to
offer.
"""

import os
import re
import shutil
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from . import registry
from .core.paths import config_search_paths

SELECTED_EDITOR_RE = re.compile(r"^\s*SELECTED_EDITOR\s*=")

SYSTEM_ALTERNATIVE = "editor"


@dataclass(frozen=True)
class ResolvedEditor:
    """An editor command as configured by one source.

    ``short_name`` is the basename of ``executable`` and is the key used for
    the registry lookup.
    """

    executable: str
    initial_args: tuple[str, ...] = ()
    short_name: str = ""
    source: str = field(default="", compare=False)

    @classmethod
    def from_parts(cls, parts: Sequence[str], source: str = "") -> "ResolvedEditor":
        executable, *rest = parts
        return cls(executable, tuple(rest), os.path.basename(executable), source)

    @classmethod
    def from_command_line(cls, command_line: str, source: str = "") -> "ResolvedEditor | None":
        # Plain whitespace split: quoting inside VISUAL/EDITOR is not honored.
        parts = command_line.split()
        if not parts:
            return None
        return cls.from_parts(parts, source)


def _environ(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def which(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Look *name* up on the search path of *environ*."""
    return shutil.which(name, path=_environ(environ).get("PATH", os.defpath))


def installed_ids(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return registry ids found on the search path, in registry order."""
    return [editor_id for editor_id in registry.ordered_ids() if which(editor_id, environ)]


def detect_environment(environ: Mapping[str, str] | None = None) -> ResolvedEditor | None:
    """``$VISUAL`` first, then ``$EDITOR``; the first non-empty value wins."""
    env = _environ(environ)
    for var in ("VISUAL", "EDITOR"):
        value = env.get(var, "").strip()
        if value:
            return ResolvedEditor.from_command_line(value, source=f"${var}")
    return None


def read_selected_editor(config_file: Path) -> str | None:
    """Return the value of the first ``SELECTED_EDITOR=`` line in *config_file*.

    Surrounding whitespace and one layer of matching quotes are removed.
    Returns ``None`` if the file has no such line or cannot be read.
    """
    try:
        lines = config_file.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return None

    for line in lines:
        if not SELECTED_EDITOR_RE.match(line):
            continue
        value = line.split("=", 1)[1].strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        return value
    return None


def detect_user_config(environ: Mapping[str, str] | None = None) -> ResolvedEditor | None:
    """Read the primary config file, or the legacy one if the primary is absent."""
    for config_file in config_search_paths(environ):
        if config_file.is_file():
            value = read_selected_editor(config_file)
            if value is None:
                return None
            return ResolvedEditor.from_command_line(value, source=str(config_file))
    return None


def detect_system_default(environ: Mapping[str, str] | None = None) -> ResolvedEditor | None:
    """The system ``editor`` alternative (e.g. Debian's update-alternatives link).

    Symlinks are resolved to the real editor so its basename can be matched
    against the registry. When resolution is not possible the alias path is
    used as-is.
    """
    alias = which(SYSTEM_ALTERNATIVE, environ)
    if not alias:
        return None

    try:
        real_path = Path(alias).resolve(strict=True)
    except (OSError, RuntimeError):
        if os.access(alias, os.X_OK):
            return ResolvedEditor.from_parts([alias], source="system alternative")
        return None

    if os.access(real_path, os.X_OK):
        return ResolvedEditor.from_parts([str(real_path)], source="system alternative")
    return None


def scan_registry(environ: Mapping[str, str] | None = None) -> ResolvedEditor | None:
    """First registry editor present on the search path, as a bare id."""
    for editor_id in registry.ordered_ids():
        if which(editor_id, environ):
            return ResolvedEditor.from_parts([editor_id], source="registry scan")
    return None
