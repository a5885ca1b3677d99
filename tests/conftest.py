"""Shared pytest fixtures and configuration for the prover-cli test suite.

Guidelines
----------
* No network or database access in any test.
* Backends and collaborators are mocked at the protocol boundary.
* Coroutines are driven with ``asyncio.run`` — no async test plugin.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from prover_cli.core.models import (
    BatchCheckpoints,
    BatchStatus,
    L1Status,
    Stage,
    StageProgress,
    StageStatus,
)
from prover_cli.infra.backend_loader import BACKEND_ENV_VAR


class FakeBackend:
    """In-memory :class:`StatusBackend` with call-recording mocks."""

    def __init__(
        self,
        batches: dict[int, BatchStatus] | None = None,
        l1_status: L1Status | None = None,
    ) -> None:
        known = dict(batches or {})
        self.fetch_batch_status = AsyncMock(side_effect=lambda n: known.get(n))
        self.fetch_l1_status = AsyncMock(return_value=l1_status)


def make_batch(number: int, *statuses: StageStatus) -> BatchStatus:
    """Batch whose stages, in pipeline order, carry *statuses*."""
    return BatchStatus(
        number=number,
        stages=tuple(
            StageProgress(stage=stage, status=status)
            for stage, status in zip(Stage, statuses)
        ),
    )


def make_l1_status(
    *,
    l1: tuple[int, int, int] = (120, 118, 115),
    node: tuple[int, int, int] = (120, 118, 115),
    l1_key: str | None = "0xabc",
    node_key: str | None = "0xabc",
) -> L1Status:
    return L1Status(
        l1=BatchCheckpoints(*l1),
        node=BatchCheckpoints(*node),
        l1_verification_key_hash=l1_key,
        node_verification_key_hash=node_key,
    )


@pytest.fixture(autouse=True)
def _no_backend_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's backend setting out of the tests."""
    monkeypatch.delenv(BACKEND_ENV_VAR, raising=False)
