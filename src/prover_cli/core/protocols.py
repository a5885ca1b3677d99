"""Protocols (interfaces) consumed by the status commands.

These define the contracts that backends and status collaborators must
satisfy.  The dispatcher and reporters depend ONLY on these protocols —
never on concrete implementations — preserving the dependency inversion
principle.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from prover_cli.core.models import BatchArgs, BatchStatus, L1Status


@runtime_checkable
class StatusBackend(Protocol):
    """Contract for status data sources (prover database, L1 RPC, ...).

    Any object that implements both coroutine methods satisfies this
    protocol structurally (no explicit inheritance required).  Backends
    may raise :class:`~prover_cli.exceptions.CLIErrors` subclasses
    directly; any other exception is mapped by the calling collaborator.
    """

    async def fetch_batch_status(self, batch_number: int) -> BatchStatus | None:
        """Return the proving progress of *batch_number*.

        Returns ``None`` when the batch is unknown.
        """
        ...  # pragma: no cover

    async def fetch_l1_status(self) -> L1Status:
        """Return L1 contract checkpoints alongside the node's view."""
        ...  # pragma: no cover


class BatchHandler(Protocol):
    """Batch status collaborator consumed by the dispatcher.

    Raises
    ------
    BatchError
        Any failure, as one of the batch collaborator's native errors.
    """

    async def run(self, args: BatchArgs) -> None:
        ...  # pragma: no cover


class L1Handler(Protocol):
    """L1 status collaborator consumed by the dispatcher.

    Raises
    ------
    CLIErrors
        Any failure, already in the command layer's error currency.
    """

    async def run(self) -> None:
        ...  # pragma: no cover
