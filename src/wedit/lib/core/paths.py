# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Per-user file locations for configuration and debug state."""

import os
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_state_dir

APP_NAME = "wedit"

CONFIG_FILE_NAME = ".weditrc"
LEGACY_CONFIG_FILE_NAME = ".selected_editor"


def _home(environ: Mapping[str, str] | None = None) -> Path:
    home = (os.environ if environ is None else environ).get("HOME")
    return Path(home) if home else Path.home()


def primary_config_file(environ: Mapping[str, str] | None = None) -> Path:
    """
    The config file written by ``wedit --config``.

    Priority:
      1. WEDIT_CONFIG_FILE
      2. $HOME/.weditrc
    """
    env = (os.environ if environ is None else environ).get("WEDIT_CONFIG_FILE")
    if env:
        return Path(env).expanduser()
    return _home(environ) / CONFIG_FILE_NAME


def secondary_config_file(environ: Mapping[str, str] | None = None) -> Path:
    """Legacy ``$HOME/.selected_editor`` (same format, never written by wedit)."""
    return _home(environ) / LEGACY_CONFIG_FILE_NAME


def config_search_paths(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return the config files in the order they are consulted."""
    return [primary_config_file(environ), secondary_config_file(environ)]


def state_root(environ: Mapping[str, str] | None = None) -> Path:
    """
    Writable state (debug log).

    Priority:
      1. WEDIT_STATE_DIR
      2. platform user state dir (``~/.local/state/wedit`` on Linux)
    """
    env = (os.environ if environ is None else environ).get("WEDIT_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_state_dir(APP_NAME))
