# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""wedit package.

Modules:
- wedit.cli: CLI entry point package (wedit)
- wedit.lib: Editor registry, detection, resolution, command building,
  interactive selection and process launch
- wedit.lib.core: Per-user paths
- wedit.lib._util: Internal helpers (ANSI colors, logging)
"""

__all__ = [
    "cli",
    "lib",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("wedit")
except Exception:
    # Running from a source checkout without an installed distribution
    __version__ = "unknown"
