"""``prover-cli status l1`` — L1 settlement state versus the node.

Compares the committed / proven / executed batch checkpoints stored in
the L1 contract with the node's own records, plus the verification key
hash on both sides.  A lagging node is reported, not treated as an
error.
"""

from __future__ import annotations

import logging

from prover_cli.cli.console import escape
from prover_cli.cli.status.utils import emit, print_table
from prover_cli.core.models import L1Status
from prover_cli.core.protocols import StatusBackend
from prover_cli.exceptions import CLIErrors, ConnectionFailedError, QueryError

logger = logging.getLogger(__name__)


class L1StatusReporter:
    """Fetch and render the L1 status.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`StatusBackend` protocol.
    """

    def __init__(self, backend: StatusBackend) -> None:
        self._backend: StatusBackend = backend

    async def run(self) -> None:
        """Report the L1 checkpoints.

        Raises
        ------
        ConnectionFailedError
            If the backend cannot reach the L1 node or database.
        QueryError
            If the backend fails for any other reason.
        """
        status = await self._fetch()
        self._render(status)

    async def _fetch(self) -> L1Status:
        try:
            return await self._backend.fetch_l1_status()
        except CLIErrors:
            raise
        except (ConnectionError, OSError) as exc:
            raise ConnectionFailedError(
                f"Cannot reach L1: {exc}",
                hint="Check the L1 RPC URL configured for the backend.",
            ) from exc
        except Exception as exc:
            raise QueryError(f"Failed to fetch L1 status: {exc}") from exc

    @staticmethod
    def _render(status: L1Status) -> None:
        l1 = status.l1.as_dict()
        node = status.node.as_dict()
        lagging = set(status.lagging)

        rows = []
        for name in l1:
            verdict = "[yellow]lagging[/yellow]" if name in lagging else "[green]OK[/green]"
            rows.append((name.capitalize(), str(l1[name]), str(node[name]), verdict))

        keys_match = status.verification_keys_match
        if keys_match is None:
            key_verdict = "[dim]unknown[/dim]"
        elif keys_match:
            key_verdict = "[green]OK[/green]"
        else:
            key_verdict = "[bold red]mismatch[/bold red]"
        rows.append((
            "Verification key",
            escape(status.l1_verification_key_hash or "-"),
            escape(status.node_verification_key_hash or "-"),
            key_verdict,
        ))

        print_table("L1 status", ("Checkpoint", "L1", "Node", "Status"), rows)

        if status.in_sync:
            emit("[bold green]Node is in sync with L1.[/bold green]")
        else:
            logger.debug("L1 out of sync: lagging=%s keys_match=%s", status.lagging, keys_match)
            emit("[bold yellow]Node is out of sync with L1.[/bold yellow]")
