"""``prover-cli status`` — dispatch to the batch and L1 status reporters.

:data:`StatusCommand` is a closed union of frozen variants, each
executed with ``await command.run(handlers)``.  The module-level
:func:`run` matches on the variant exhaustively and awaits exactly one
collaborator; adding a status category means adding a variant *and* a
match arm, which ``assert_never`` enforces under a type checker.

The dispatcher performs no I/O of its own.  It is the conversion
boundary for the batch collaborator's native errors; everything else
passes through unchanged, including task cancellation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, assert_never

from prover_cli.cli.status.batch import BatchStatusReporter
from prover_cli.cli.status.l1 import L1StatusReporter
from prover_cli.core.models import BatchArgs
from prover_cli.core.protocols import BatchHandler, L1Handler, StatusBackend
from prover_cli.exceptions import BatchError, to_cli_error


@dataclass(frozen=True, slots=True)
class BatchCommand:
    """``status batch``: report proving progress for the given batches."""

    args: BatchArgs

    async def run(self, handlers: StatusHandlers) -> None:
        await run(self, handlers)


@dataclass(frozen=True, slots=True)
class L1Command:
    """``status l1``: report L1 settlement checkpoints."""

    async def run(self, handlers: StatusHandlers) -> None:
        await run(self, handlers)


StatusCommand: TypeAlias = BatchCommand | L1Command


@dataclass(frozen=True, slots=True)
class StatusHandlers:
    """The collaborators a :data:`StatusCommand` is dispatched to."""

    batch: BatchHandler
    l1: L1Handler

    @classmethod
    def from_backend(cls, backend: StatusBackend) -> StatusHandlers:
        """Wire the default reporters to *backend*."""
        return cls(
            batch=BatchStatusReporter(backend),
            l1=L1StatusReporter(backend),
        )


async def run(command: StatusCommand, handlers: StatusHandlers) -> None:
    """Execute *command* with the matching collaborator.

    Raises
    ------
    CLIErrors
        Whatever the collaborator reported.  Batch errors are converted
        with :func:`~prover_cli.exceptions.to_cli_error` and chained to
        the original.
    """
    match command:
        case BatchCommand(args=args):
            try:
                await handlers.batch.run(args)
            except BatchError as exc:
                raise to_cli_error(exc) from exc
        case L1Command():
            await handlers.l1.run()
        case _:
            assert_never(command)


__all__: list[str] = [
    "BatchArgs",
    "BatchCommand",
    "L1Command",
    "StatusCommand",
    "StatusHandlers",
    "run",
]
