"""Location of the real daemon binary."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from dsproxy.config import Settings
from dsproxy.errors import ResolutionError

REAL_BINARY_SUFFIX = ".bin"


def resolve_binary(settings: Settings, argv0: str) -> str:
    """Return the path of the real daemon.

    ``DSP_VMTOOLSD`` wins verbatim, untouched by path normalization, so a
    relative ``./vmtoolsd.bin`` is never looked up on ``PATH``. Otherwise the
    running program's path, with every symlink resolved, gets
    ``REAL_BINARY_SUFFIX`` appended: a ``/usr/bin/vmtoolsd`` link to
    ``/opt/dsproxy/dsproxy`` finds ``/opt/dsproxy/dsproxy.bin``.
    """

    if settings.vmtoolsd:
        return settings.vmtoolsd

    program = _running_program(argv0)
    try:
        resolved = program.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ResolutionError(f"cannot resolve {program}: {exc}") from exc
    return str(resolved.with_name(resolved.name + REAL_BINARY_SUFFIX))


def ensure_binary_exists(path: str) -> str:
    if not os.path.exists(path):
        raise ResolutionError(f"stat {path}: no such file or directory")
    return path


def _running_program(argv0: str) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).absolute()
    if not argv0:
        raise ResolutionError("cannot determine the running program path")
    if os.sep not in argv0 and not (os.altsep and os.altsep in argv0):
        found = shutil.which(argv0)
        if found is None:
            raise ResolutionError(f"cannot find {argv0} on PATH")
        argv0 = found
    return Path(argv0).absolute()
