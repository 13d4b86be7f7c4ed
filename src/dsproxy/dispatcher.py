"""Final invocation strategy for rewritten arguments."""

from __future__ import annotations

from dsproxy.launcher import ProcessLauncher
from dsproxy.logging_utils import DebugTrace
from dsproxy.rewriter import CMD_FLAG, RewrittenArguments


def dispatch_mode(rewritten: RewrittenArguments) -> str:
    """Name the strategy ``Dispatcher.dispatch`` will use."""

    count = len(rewritten.generated)
    if count == 0:
        return "exec"
    if count == 1:
        return "exec+cmd"
    return "sequential"


class Dispatcher:
    """Launch the real daemon for one set of rewritten arguments."""

    def __init__(self, binary: str, launcher: ProcessLauncher, trace: DebugTrace) -> None:
        self.binary = binary
        self.launcher = launcher
        self.trace = trace

    def dispatch(self, rewritten: RewrittenArguments) -> int:
        """Run the daemon and return the exit status for this process.

        With zero or one generated command the daemon replaces this process
        (or runs as a single child where that is unsupported). With more, one
        child runs per command, in order, stopping at the first failure.
        Commands that already ran are not rolled back.
        """

        common_args = rewritten.common_args
        generated = rewritten.generated
        if len(generated) == 0:
            return self._replace(common_args)
        if len(generated) == 1:
            return self._replace([*common_args, CMD_FLAG, generated[0]])

        for command in generated:
            args = [*common_args[1:], CMD_FLAG, command]
            self.trace.log_args("run", args)
            status = self.launcher.run(self.binary, args)
            if status != 0:
                return status
        return 0

    def _replace(self, argv: list[str]) -> int:
        self.trace.log_args("replace", argv)
        return self.launcher.replace(self.binary, argv)
