"""Application-level exception types for dsproxy."""

from __future__ import annotations

EXIT_FAILURE = 1


class DsproxyError(Exception):
    """Base exception for dsproxy.

    Every subclass is terminal for the current run: the entry point reports
    the message on stderr and exits with ``EXIT_FAILURE``.
    """

    exit_code: int = EXIT_FAILURE


class ResolutionError(DsproxyError):
    """Raised when the real daemon binary cannot be located or does not exist."""


class DecodeError(DsproxyError):
    """Raised when a dataset command payload is not valid JSON of the expected shape."""


class LaunchError(DsproxyError):
    """Raised when the operating system cannot start or replace the daemon process."""
