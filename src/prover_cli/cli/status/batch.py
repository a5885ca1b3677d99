"""``prover-cli status batch`` — per-batch proving progress.

Owns the batch argument schema and reports each requested batch either
as a one-line summary or, with ``--verbose``, as a per-stage table.

Failures are raised as :class:`~prover_cli.exceptions.BatchError`
subclasses; the status dispatcher converts them to ``CLIErrors``.
"""

from __future__ import annotations

import argparse
import logging

from prover_cli.cli.status.utils import emit, print_table, styled_status
from prover_cli.core.models import BatchArgs, BatchStatus, StageStatus
from prover_cli.core.protocols import StatusBackend
from prover_cli.exceptions import (
    BatchBackendUnavailableError,
    BatchError,
    BatchLookupError,
    BatchNotFoundError,
    CLIErrors,
    InvalidBatchArgsError,
)

logger = logging.getLogger(__name__)


def args_from_namespace(namespace: argparse.Namespace) -> BatchArgs:
    """Build :class:`BatchArgs` from the parsed ``status batch`` options."""
    return BatchArgs(
        batches=tuple(namespace.batches or ()),
        verbose=bool(namespace.verbose),
    )


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the ``status batch`` options on *parser*."""
    parser.add_argument(
        "-n",
        "--number",
        dest="batches",
        type=int,
        nargs="+",
        required=True,
        metavar="BATCH",
        help="L1 batch number(s) to inspect.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the status of every proving stage.",
    )


def _validate(args: BatchArgs) -> None:
    if not args.batches:
        raise InvalidBatchArgsError(
            "At least one batch number is required.",
            hint="Use -n/--number to name the batch(es).",
        )
    negative = tuple(n for n in args.batches if n < 0)
    if negative:
        raise InvalidBatchArgsError(
            f"Batch numbers must not be negative: {', '.join(map(str, negative))}",
            batch_numbers=negative,
        )


class BatchStatusReporter:
    """Fetch and render the status of the requested batches.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`StatusBackend` protocol.
    """

    def __init__(self, backend: StatusBackend) -> None:
        self._backend: StatusBackend = backend

    async def run(self, args: BatchArgs) -> None:
        """Report on every batch in *args*.

        Found batches are rendered before the missing ones are reported,
        so a partially successful lookup still prints what it could.

        Raises
        ------
        InvalidBatchArgsError
            If *args* names no batch or a negative batch number.
        BatchNotFoundError
            If one or more batches are unknown to the backend.
        BatchLookupError
            If the backend fails while querying.
        BatchBackendUnavailableError
            If the backend cannot be reached.
        """
        _validate(args)

        missing: list[int] = []
        for number in args.batches:
            status = await self._fetch(number)
            if status is None:
                logger.debug("Batch %d not found", number)
                missing.append(number)
                continue
            self._render(status, verbose=args.verbose)

        if missing:
            numbers = ", ".join(map(str, missing))
            raise BatchNotFoundError(
                f"No such batch: {numbers}",
                hint="The batch may not be sealed yet, or its proving data was pruned.",
                batch_numbers=tuple(missing),
            )

    # ------------------------------------------------------------------
    # Backend delegation (safe boundary)
    # ------------------------------------------------------------------

    async def _fetch(self, number: int) -> BatchStatus | None:
        """Call the backend and ensure only our exceptions escape."""
        try:
            return await self._backend.fetch_batch_status(number)
        except (BatchError, CLIErrors):
            raise
        except (ConnectionError, OSError) as exc:
            raise BatchBackendUnavailableError(
                f"Backend unreachable while fetching batch {number}: {exc}",
                hint="Check the database / RPC connection settings of the backend.",
                batch_numbers=(number,),
            ) from exc
        except Exception as exc:
            raise BatchLookupError(
                f"Failed to fetch batch {number}: {exc}",
                batch_numbers=(number,),
            ) from exc

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def _render(status: BatchStatus, *, verbose: bool) -> None:
        if not verbose:
            line = f"Batch [bold]{status.number}[/bold]: {styled_status(status.overall)}"
            blocking = status.blocking_stage
            if blocking is not None and status.overall is not StageStatus.JOBS_NOT_FOUND:
                line += f" [dim]({blocking.stage.label})[/dim]"
            emit(line)
            return

        rows = [
            (progress.stage.label, styled_status(progress.status))
            for progress in status.ordered_stages
        ]
        print_table(
            f"Batch {status.number}: {status.overall.label}",
            ("Stage", "Status"),
            rows,
        )
