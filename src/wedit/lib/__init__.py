# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Editor resolution and invocation engine.

Re-exports the modules under short names so ``from wedit.lib import registry``
works alongside the full dotted imports.
"""

from wedit.lib import command, detectors, errors, launcher, registry, resolver, selector
from wedit.lib.core import paths

__all__ = [
    "registry", "detectors", "resolver", "command",
    "selector", "launcher", "errors", "paths",
]
