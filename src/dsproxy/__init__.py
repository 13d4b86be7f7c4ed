"""dsproxy - translate dataset commands for the guest tools daemon."""

from dsproxy.rewriter import RewrittenArguments, parse_dataset_command, rewrite

__version__ = "0.1.0"

__all__ = ["RewrittenArguments", "parse_dataset_command", "rewrite"]
