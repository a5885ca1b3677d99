"""Core layer — domain models and the protocols the commands depend on.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from prover_cli.core.models import (
    BatchArgs,
    BatchCheckpoints,
    BatchStatus,
    L1Status,
    Stage,
    StageProgress,
    StageStatus,
)
from prover_cli.core.protocols import BatchHandler, L1Handler, StatusBackend

__all__: list[str] = [
    "BatchArgs",
    "BatchCheckpoints",
    "BatchHandler",
    "BatchStatus",
    "L1Handler",
    "L1Status",
    "Stage",
    "StageProgress",
    "StageStatus",
    "StatusBackend",
]
