# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Run the detectors in priority order."""

from collections.abc import Callable, Mapping

from ._util.logging_utils import log
from .detectors import (
    ResolvedEditor,
    detect_environment,
    detect_system_default,
    detect_user_config,
    scan_registry,
)

Detector = Callable[[Mapping[str, str] | None], ResolvedEditor | None]

# Explicit override > saved preference > OS default > whatever is installed.
DETECTORS: tuple[Detector, ...] = (
    detect_environment,
    detect_user_config,
    detect_system_default,
    scan_registry,
)


def resolve(environ: Mapping[str, str] | None = None) -> ResolvedEditor | None:
    """Return the first editor any detector produces, or ``None``.

    Results are never merged: the first detector that answers decides.
    """
    for detector in DETECTORS:
        resolved = detector(environ)
        if resolved is not None:
            log(f"Using editor from {resolved.source}: {resolved.executable}")
            return resolved
    return None
