"""Docker Swarm stack commands."""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from stackctl.config import get_config
from stackctl.errors import StackctlError
from stackctl.services import docker
from stackctl.services.stacks import get_stacks, print_table

app = typer.Typer(no_args_is_help=True)
err_console = Console(stderr=True)


@app.command("ls")
def list_stacks() -> None:
    """List stacks and the number of services in each."""
    cfg = get_config()
    try:
        client = docker.get_client(cfg)
        try:
            stacks = get_stacks(client)
        finally:
            client.close()
    except StackctlError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(exc.exit_code) from exc

    print_table(sys.stdout, stacks)


app.command("list", help="List stacks (alias of ls).")(list_stacks)
