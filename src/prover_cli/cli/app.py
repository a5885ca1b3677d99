"""CLI application entry point and command routing for prover-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~prover_cli.exceptions.CLIErrors`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing produces a
  :data:`~prover_cli.cli.status.StatusCommand` and the status dispatcher
  does the rest.
* This module owns logging configuration and the event loop
  (``asyncio.run``), one per invocation.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from prover_cli.cli import exit_codes
from prover_cli.cli import status
from prover_cli.cli.console import console, escape, get_rich_console
from prover_cli.cli.status import BatchCommand, L1Command, StatusCommand
from prover_cli.cli.status import batch as batch_cli
from prover_cli.exceptions import CLIErrors, InvalidArgumentsError
from prover_cli.infra.backend_loader import BACKEND_ENV_VAR, load_backend
from prover_cli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``prover-cli status batch -n N [N ...] [--verbose]``
    * ``prover-cli status l1``
    * ``prover-cli --version``
    """
    parser = argparse.ArgumentParser(
        prog="prover-cli",
        description="Inspect the state of the proof generation pipeline.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--backend",
        default=os.environ.get(BACKEND_ENV_VAR),
        metavar="MODULE:ATTR",
        help=f"Status backend to query (default: ${BACKEND_ENV_VAR}).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    status_parser = commands.add_parser("status", help="Show batch or L1 status.")
    status_commands = status_parser.add_subparsers(dest="status_command", metavar="STATUS")

    batch_parser = status_commands.add_parser(
        "batch", help="Proving progress of one or more batches.",
    )
    batch_cli.add_arguments(batch_parser)
    status_commands.add_parser("l1", help="L1 settlement checkpoints versus the node.")

    parser.set_defaults(_status_parser=status_parser)
    return parser


def _status_command(namespace: argparse.Namespace) -> StatusCommand:
    """Map parsed arguments to a :data:`StatusCommand` variant."""
    if namespace.status_command == "batch":
        return BatchCommand(batch_cli.args_from_namespace(namespace))
    if namespace.status_command == "l1":
        return L1Command()
    raise InvalidArgumentsError(
        f"Unknown status command: {namespace.status_command!r}",
        hint="Choose one of: batch, l1",
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging(debug: bool) -> None:
    """Route log records to stderr, through Rich when it is installed."""
    level = logging.DEBUG if debug else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_rich_console(), show_path=debug)],
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(level)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_status(command: StatusCommand, backend_reference: str | None) -> int:
    """Load the backend and run *command* on a fresh event loop."""
    backend = load_backend(backend_reference)
    handlers = status.StatusHandlers.from_backend(backend)

    logger.debug("Dispatching %s", type(command).__name__)
    asyncio.run(command.run(handlers))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the prover-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.status_command is None:
        args._status_parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.debug)
    return _handle_status(_status_command(args), args.backend)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CLIErrors as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
