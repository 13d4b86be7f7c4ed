"""Dry-run inspection CLI."""

from __future__ import annotations

import os

import typer

from dsproxy.config import load_settings
from dsproxy.dispatcher import dispatch_mode
from dsproxy.errors import DsproxyError
from dsproxy.resolver import resolve_binary
from dsproxy.rewriter import rewrite

app = typer.Typer(name="dsproxy-inspect", help="Show how dsproxy would forward an invocation", add_completion=False)


@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def inspect(
    args: list[str] = typer.Argument(..., help="Daemon invocation, program name first"),  # noqa: B008
) -> None:
    """Rewrite ARGS and print the resulting daemon invocations without running them."""

    settings = load_settings()
    try:
        binary = resolve_binary(settings, args[0])
        rewritten = rewrite(args)
    except DsproxyError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(exc.exit_code) from None

    typer.echo(f"binary: {binary}{'' if os.path.exists(binary) else ' (missing)'}")
    typer.echo(f"mode: {dispatch_mode(rewritten)}")
    typer.echo(f"common: {' '.join(rewritten.common_args)}")
    for command in rewritten.generated:
        typer.echo(f"generated: {command}")


if __name__ == "__main__":
    app()
