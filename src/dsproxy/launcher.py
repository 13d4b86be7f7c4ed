"""Process-control backends for launching the real daemon."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import Protocol

from dsproxy.errors import EXIT_FAILURE, LaunchError


class ProcessLauncher(Protocol):
    """Contract shared by the exec and spawn backends.

    Both inherit stdio unchanged and report the daemon's exact exit status.
    """

    def replace(self, path: str, argv: Sequence[str]) -> int: ...

    def run(self, path: str, args: Sequence[str]) -> int: ...


class SpawnLauncher:
    """Run the daemon as a child process and wait for it."""

    def replace(self, path: str, argv: Sequence[str]) -> int:
        return self.run(path, argv[1:])

    def run(self, path: str, args: Sequence[str]) -> int:
        try:
            completed = subprocess.run([path, *args], check=False)  # noqa: S603
        except (OSError, subprocess.SubprocessError) as exc:
            raise LaunchError(f"{path}: {exc}") from exc
        # Negative codes mean the child was killed by a signal.
        if completed.returncode < 0:
            return EXIT_FAILURE
        return completed.returncode


class ExecLauncher(SpawnLauncher):
    """Replace the current process image with the daemon."""

    def replace(self, path: str, argv: Sequence[str]) -> int:
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execv(path, list(argv))  # noqa: S606
        except (OSError, ValueError) as exc:
            raise LaunchError(f"{path}: {exc}") from exc


def default_launcher() -> ProcessLauncher:
    """Pick the backend for the running platform."""

    # Windows has no process-image replacement.
    if sys.platform == "win32":
        return SpawnLauncher()
    return ExecLauncher()
