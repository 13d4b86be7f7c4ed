"""Startup wiring for the interposer."""

from __future__ import annotations

from collections.abc import Sequence

from dsproxy.config import Settings
from dsproxy.dispatcher import Dispatcher
from dsproxy.launcher import ProcessLauncher, default_launcher
from dsproxy.logging_utils import DebugTrace, configure_logging
from dsproxy.resolver import ensure_binary_exists, resolve_binary
from dsproxy.rewriter import rewrite


def run(argv: Sequence[str], settings: Settings, launcher: ProcessLauncher | None = None) -> int:
    """Translate one invocation and hand it to the real daemon.

    Raises ``DsproxyError`` subclasses for every fatal condition; nothing is
    launched before resolution and decoding have succeeded.
    """

    configure_logging(settings)
    trace = DebugTrace.from_settings(settings)

    binary = ensure_binary_exists(resolve_binary(settings, argv[0] if argv else ""))
    trace.log_args("argv", argv)

    rewritten = rewrite(argv)
    trace.log_args("commonArgs", rewritten.common_args)
    trace.log_args("guestinfoArgs", rewritten.generated)

    dispatcher = Dispatcher(binary, launcher or default_launcher(), trace)
    return dispatcher.dispatch(rewritten)
