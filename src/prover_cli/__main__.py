"""Allow ``python -m prover_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m prover_cli`` behaves identically to the ``prover-cli``
console script.
"""

from __future__ import annotations

from prover_cli.cli.app import cli

if __name__ == "__main__":
    cli()
