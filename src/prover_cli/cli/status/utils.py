"""Rendering helpers shared by the status reporters.

Tables are rendered with Rich when it is installed and fall back to
fixed-width plain text otherwise, so status reports stay usable in
minimal environments.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from prover_cli.cli.console import out, rich_available
from prover_cli.core.models import StageStatus

_STATUS_STYLES: dict[StageStatus, str] = {
    StageStatus.SUCCESSFUL: "green",
    StageStatus.FAILED: "bold red",
    StageStatus.IN_PROGRESS: "yellow",
    StageStatus.QUEUED: "cyan",
    StageStatus.WAITING_FOR_PROOFS: "blue",
    StageStatus.JOBS_NOT_FOUND: "dim",
}

_MARKUP_RE = re.compile(r"\[/?[a-z][a-z ]*\]")


def strip_markup(text: str) -> str:
    """Remove simple Rich markup tags such as ``[bold red]`` / ``[/]``."""
    return _MARKUP_RE.sub("", text).replace("[/]", "")


def styled_status(status: StageStatus) -> str:
    """Return *status* label wrapped in its Rich colour markup."""
    style = _STATUS_STYLES[status]
    return f"[{style}]{status.label}[/{style}]"


def emit(text: str = "") -> None:
    """Write one report line to stdout, dropping markup without Rich."""
    if rich_available():
        out.print(text)
    else:
        print(strip_markup(text), file=sys.stdout)


def print_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Render a titled table of string cells (cells may carry markup)."""
    if not rich_available():
        _print_plain_table(title, columns, rows)
        return

    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for index, column in enumerate(columns):
        table.add_column(column, style="bold" if index == 0 else None)
    for row in rows:
        table.add_row(*row)
    out.print(table)


def _print_plain_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    plain_rows = [[strip_markup(cell) for cell in row] for row in rows]
    widths = [
        max([len(column)] + [len(row[index]) for row in plain_rows])
        for index, column in enumerate(columns)
    ]
    total = sum(widths) + 2 * (len(widths) - 1)

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    print(title, file=sys.stdout)
    print("=" * total, file=sys.stdout)
    print(_line(columns), file=sys.stdout)
    print("-" * total, file=sys.stdout)
    for row in plain_rows:
        print(_line(row), file=sys.stdout)
