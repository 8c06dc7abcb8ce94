"""Stack aggregation and table rendering for ``stack ls``."""

from __future__ import annotations

import logging
import os
from typing import Iterable, TextIO

import docker
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stackctl.constants import LABEL_NAMESPACE, LIST_HEADERS
from stackctl.errors import MissingLabelError
from stackctl.models import Stack
from stackctl.services.docker import list_stack_services

log = logging.getLogger(__name__)


def get_stacks(client: docker.DockerClient) -> list[Stack]:
    """Group stack services by namespace label and count them.

    Raises ``MissingLabelError`` on the first service without the label;
    nothing is returned for the services seen before it.
    """
    counts: dict[str, int] = {}
    for service in list_stack_services(client):
        name = service.labels.get(LABEL_NAMESPACE)
        if name is None:
            raise MissingLabelError(service.id, LABEL_NAMESPACE)
        counts[name] = counts.get(name, 0) + 1
    log.debug("Found %d stacks", len(counts))
    return [Stack(name=name, services=n) for name, n in counts.items()]


def _discard_output(out: TextIO) -> None:
    """Point ``out``'s descriptor at /dev/null so buffered data cannot fail at exit."""
    try:
        fd = out.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def build_table(stacks: Iterable[Stack]) -> Table:
    """Return the NAME/SERVICES table for ``stacks``, sorted by name."""
    table = Table(box=None, show_edge=False, pad_edge=False, header_style=None, padding=(0, 1))
    for header in LIST_HEADERS:
        table.add_column(header, no_wrap=True)
    for stack in sorted(stacks, key=lambda s: s.name):
        table.add_row(Text(stack.name), Text(str(stack.services)))
    return table


def print_table(out: TextIO, stacks: Iterable[Stack]) -> None:
    """Write the stack table to ``out`` and flush it.

    Output is best effort: write and flush errors are logged and dropped,
    and ``out`` is redirected to /dev/null so nothing is left to fail when
    the interpreter flushes it on exit.
    """
    stacks = list(stacks)
    name_width = max([len(LIST_HEADERS[0])] + [cell_len(s.name) for s in stacks])
    console = Console(
        file=out,
        width=max(80, name_width + 2 + len(LIST_HEADERS[1]) + 20),
        color_system=None,
        highlight=False,
    )
    try:
        console.print(build_table(stacks))
        out.flush()
    except OSError as exc:
        log.debug("Ignoring output error: %s", exc)
        _discard_output(out)
