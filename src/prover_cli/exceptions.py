"""Exception hierarchies for prover-cli.

Two roots live here:

* :class:`CLIErrors` — the only error currency that crosses the command
  layer.  The CLI error boundary renders it and maps it to an exit code.
* :class:`BatchError` — the batch collaborator's native errors.  They
  never reach the error boundary directly; the status dispatcher
  converts them with :func:`to_cli_error`.

Raw backend exceptions must NEVER propagate beyond the collaborator that
called the backend — they are caught there and re-raised as a typed
subclass defined here.

Hierarchy
---------
CLIErrors
├── NotFoundError
├── InvalidArgumentsError
├── QueryError
├── ConnectionFailedError
├── ConfigurationError
└── EnvironmentError

BatchError
├── BatchNotFoundError
├── InvalidBatchArgsError
├── BatchLookupError
└── BatchBackendUnavailableError
"""

from __future__ import annotations


class CLIErrors(Exception):
    """Base exception for every failure reported by the command layer.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        batch_numbers: tuple[int, ...] = (),
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.batch_numbers: tuple[int, ...] = batch_numbers
        """Batches the failure refers to, empty when not batch-specific."""


# --- Lookup ----------------------------------------------------------------

class NotFoundError(CLIErrors):
    """Raised when the requested batch(es) are unknown to the backend."""


class InvalidArgumentsError(CLIErrors):
    """Raised when subcommand arguments are rejected."""


# --- Backend ---------------------------------------------------------------

class QueryError(CLIErrors):
    """Raised when a status query against the backend fails."""


class ConnectionFailedError(CLIErrors):
    """Raised when the backend (database, L1 RPC) cannot be reached."""


# --- Environment / configuration ------------------------------------------

class ConfigurationError(CLIErrors):
    """Raised when no usable status backend is configured."""


class EnvironmentError(CLIErrors):
    """Raised when a required runtime dependency is not available."""


# ---------------------------------------------------------------------------
# Batch collaborator errors
# ---------------------------------------------------------------------------

class BatchError(Exception):
    """Base exception for the batch status collaborator."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        batch_numbers: tuple[int, ...] = (),
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        self.batch_numbers: tuple[int, ...] = batch_numbers


class BatchNotFoundError(BatchError):
    """Raised when one or more requested batches do not exist."""


class InvalidBatchArgsError(BatchError):
    """Raised when the batch arguments fail validation."""


class BatchLookupError(BatchError):
    """Raised when the backend fails while looking up a batch."""


class BatchBackendUnavailableError(BatchError):
    """Raised when the backend cannot be reached during a batch lookup."""


_BATCH_ERROR_MAP: dict[type[BatchError], type[CLIErrors]] = {
    BatchNotFoundError: NotFoundError,
    InvalidBatchArgsError: InvalidArgumentsError,
    BatchLookupError: QueryError,
    BatchBackendUnavailableError: ConnectionFailedError,
    BatchError: QueryError,
}


def to_cli_error(exc: BatchError) -> CLIErrors:
    """Convert a batch collaborator error into its :class:`CLIErrors` variant.

    The message, hint and batch numbers are carried over unchanged.  The
    caller is expected to raise the result ``from exc`` so the native
    error stays reachable through ``__cause__``.
    """
    for klass in type(exc).__mro__:
        target = _BATCH_ERROR_MAP.get(klass)
        if target is not None:
            return target(str(exc), hint=exc.hint, batch_numbers=exc.batch_numbers)
    raise TypeError(f"not a BatchError: {type(exc).__name__}")  # pragma: no cover
