"""Runtime logging helpers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from loguru import logger

from dsproxy.config import Settings

TRACE_FORMAT = "{time:YYYY/MM/DD HH:mm:ss} {message}"


def configure_logging(settings: Settings) -> None:
    """Configure process-level logging once.

    Without debug no sink is installed, so the daemon's stderr is left alone.
    """

    logger.remove()
    if not settings.debug:
        return
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=TRACE_FORMAT,
        backtrace=False,
        diagnose=False,
    )


class DebugTrace:
    """Conditional tracing of argument vectors."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> DebugTrace:
        return cls(settings.debug)

    def log_args(self, label: str, values: Sequence[str]) -> None:
        if not self.enabled:
            return
        logger.debug("{} len={}, val={}", label, len(values), ",".join(values))
