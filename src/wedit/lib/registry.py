# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Static table of known editors and how to make them block."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """How an editor behaves relative to the invoking terminal."""

    GRAPHICAL = "graphical"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class EditorSpec:
    """Properties of one known editor.

    ``wait_flag`` is the argument that keeps a graphical editor's process
    alive until the file is closed; empty when none applies.
    """

    id: str
    wait_flag: str
    category: Category
    display_name: str


# Order defines scan, menu and listing precedence.
EDITORS: tuple[EditorSpec, ...] = (
    EditorSpec("code", "--wait", Category.GRAPHICAL, "Visual Studio Code"),
    EditorSpec("subl", "--wait", Category.GRAPHICAL, "Sublime Text"),
    EditorSpec("atom", "--wait", Category.GRAPHICAL, "Atom"),
    EditorSpec("gedit", "--wait", Category.GRAPHICAL, "gedit (GNOME Text Editor)"),
    EditorSpec("kate", "--block", Category.GRAPHICAL, "Kate (KDE Advanced Text Editor)"),
    EditorSpec("gvim", "--remote-wait-silent", Category.GRAPHICAL, "gVim (Graphical Vim)"),
    EditorSpec("nvim", "", Category.TERMINAL, "Neovim"),
    EditorSpec("vim", "", Category.TERMINAL, "Vim (Vi IMproved)"),
    EditorSpec("nano", "", Category.TERMINAL, "Nano"),
    # emacsclient waits for the server by default; its --no-wait flag does the opposite.
    EditorSpec("emacsclient", "", Category.GRAPHICAL, "Emacs Client (emacs --daemon)"),
    EditorSpec("vi", "", Category.TERMINAL, "Vi"),
)

_BY_ID = MappingProxyType({spec.id: spec for spec in EDITORS})
_ORDERED_IDS = tuple(spec.id for spec in EDITORS)

# Used for editors that are not in the table.
UNKNOWN_EDITOR = EditorSpec("", "", Category.TERMINAL, "")


def lookup(editor_id: str) -> EditorSpec | None:
    """Return the spec registered under *editor_id*, or ``None``."""
    return _BY_ID.get(editor_id)


def ordered_ids() -> tuple[str, ...]:
    """Return all registered ids in precedence order."""
    return _ORDERED_IDS
