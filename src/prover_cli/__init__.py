"""prover-cli — status inspection for the proof generation pipeline.

Reports per-batch proving progress and L1 settlement state through a
pluggable status backend.
"""

from prover_cli.version import __version__

__all__: list[str] = ["__version__"]
