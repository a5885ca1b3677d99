"""Domain models for prover-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and derived views.  They carry zero I/O and
no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Proving pipeline
# ---------------------------------------------------------------------------

class Stage(str, Enum):
    """Proving pipeline stages, declared in execution order."""

    BASIC_WITNESS_GENERATOR = "basic_witness_generator"
    LEAF_WITNESS_GENERATOR = "leaf_witness_generator"
    NODE_WITNESS_GENERATOR = "node_witness_generator"
    RECURSION_TIP = "recursion_tip"
    SCHEDULER = "scheduler"
    COMPRESSOR = "compressor"

    @property
    def label(self) -> str:
        """Human-readable stage name."""
        return self.value.replace("_", " ").title()


class StageStatus(str, Enum):
    """Status of the jobs belonging to one stage of one batch."""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    SUCCESSFUL = "successful"
    FAILED = "failed"
    WAITING_FOR_PROOFS = "waiting_for_proofs"
    JOBS_NOT_FOUND = "jobs_not_found"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


_STAGE_ORDER: dict[Stage, int] = {stage: index for index, stage in enumerate(Stage)}


@dataclass(frozen=True, slots=True)
class StageProgress:
    """Status of a single stage for a batch."""

    stage: Stage
    status: StageStatus


@dataclass(frozen=True, slots=True)
class BatchStatus:
    """Proving progress of one L1 batch across all pipeline stages."""

    number: int
    """L1 batch number."""

    stages: tuple[StageProgress, ...]
    """Per-stage progress as reported by the backend (any order)."""

    @property
    def ordered_stages(self) -> tuple[StageProgress, ...]:
        """Stages sorted in pipeline order."""
        return tuple(sorted(self.stages, key=lambda p: _STAGE_ORDER[p.stage]))

    @property
    def current_stage(self) -> StageProgress | None:
        """First stage, in pipeline order, that has not succeeded."""
        return next(
            (p for p in self.ordered_stages if p.status is not StageStatus.SUCCESSFUL),
            None,
        )

    @property
    def blocking_stage(self) -> StageProgress | None:
        """Stage to blame for the overall status.

        The first failed stage when any stage failed, otherwise
        :attr:`current_stage`.
        """
        failed = next(
            (p for p in self.ordered_stages if p.status is StageStatus.FAILED),
            None,
        )
        return failed if failed is not None else self.current_stage

    @property
    def overall(self) -> StageStatus:
        """Collapse the per-stage statuses into a single batch status."""
        statuses = [p.status for p in self.stages]
        if all(s is StageStatus.JOBS_NOT_FOUND for s in statuses):
            # Also covers a batch with no stages reported at all.
            return StageStatus.JOBS_NOT_FOUND
        if StageStatus.FAILED in statuses:
            return StageStatus.FAILED
        current = self.current_stage
        if current is None:
            return StageStatus.SUCCESSFUL
        return current.status


@dataclass(frozen=True, slots=True)
class BatchArgs:
    """Arguments of ``status batch``."""

    batches: tuple[int, ...]
    """L1 batch numbers to report on, in request order."""

    verbose: bool = False
    """Show every pipeline stage instead of the summary line."""


# ---------------------------------------------------------------------------
# L1 settlement
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BatchCheckpoints:
    """Last committed / proven / executed batch numbers seen by one party."""

    committed: int
    proven: int
    executed: int

    def as_dict(self) -> dict[str, int]:
        return {
            "committed": self.committed,
            "proven": self.proven,
            "executed": self.executed,
        }


@dataclass(frozen=True, slots=True)
class L1Status:
    """Settlement state of the L1 contract compared with the node's view."""

    l1: BatchCheckpoints
    """Checkpoints read from the L1 diamond proxy contract."""

    node: BatchCheckpoints
    """Checkpoints recorded by the node / prover database."""

    l1_verification_key_hash: str | None = None
    node_verification_key_hash: str | None = None

    @property
    def lagging(self) -> tuple[str, ...]:
        """Checkpoint names on which the node and L1 disagree."""
        l1 = self.l1.as_dict()
        node = self.node.as_dict()
        return tuple(name for name in l1 if l1[name] != node[name])

    @property
    def verification_keys_match(self) -> bool | None:
        """``None`` when either side does not report a key hash."""
        if self.l1_verification_key_hash is None or self.node_verification_key_hash is None:
            return None
        return (
            self.l1_verification_key_hash.lower()
            == self.node_verification_key_hash.lower()
        )

    @property
    def in_sync(self) -> bool:
        return not self.lagging and self.verification_keys_match is not False
