"""Infrastructure layer — integration with externally supplied backends.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Every failure is re-raised as a :class:`~prover_cli.exceptions.CLIErrors`
  subclass.
"""

from prover_cli.infra.backend_loader import BACKEND_ENV_VAR, load_backend

__all__: list[str] = ["BACKEND_ENV_VAR", "load_backend"]
