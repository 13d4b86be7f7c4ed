"""Interposer entry point: ``dsproxy`` or ``python -m dsproxy``."""

from __future__ import annotations

import sys

import typer

from dsproxy.app import run
from dsproxy.config import load_settings
from dsproxy.errors import DsproxyError


def main() -> None:
    # sys.argv is forwarded as-is; it belongs to the daemon, not to us.
    try:
        status = run(sys.argv, load_settings())
    except DsproxyError as exc:
        typer.echo(str(exc), err=True)
        raise SystemExit(exc.exit_code) from None
    raise SystemExit(status)


if __name__ == "__main__":
    main()
