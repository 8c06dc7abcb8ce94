"""Root Typer application for stackctl."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from stackctl.commands import stack
from stackctl.config import get_config
from stackctl.errors import StackctlError
from stackctl.logging_config import setup_logging

app = typer.Typer(
    name="stackctl",
    help="Inspect application stacks deployed on a Docker Swarm cluster.",
    no_args_is_help=True,
)
err_console = Console(stderr=True)

app.add_typer(stack.app, name="stack", help="Manage Docker stacks.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    try:
        cfg = get_config()
    except StackctlError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(exc.exit_code) from exc
    setup_logging("DEBUG" if verbose else cfg.log_level)


if __name__ == "__main__":
    app()
