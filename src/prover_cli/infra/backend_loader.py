"""Resolve a ``module:attr`` reference into a :class:`StatusBackend`.

The actual database and L1 queries live in separately installed
packages.  They are plugged in by reference, e.g.::

    prover-cli --backend my_prover_backend.status:create_backend status l1

The referenced attribute is either a ready backend object or a
zero-argument factory returning one.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from prover_cli.core.protocols import StatusBackend
from prover_cli.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

BACKEND_ENV_VAR: str = "PROVER_CLI_STATUS_BACKEND"
"""Environment variable consulted when ``--backend`` is not given."""

_HINT = (
    f"Pass --backend package.module:attr or set {BACKEND_ENV_VAR}."
)


def _split_reference(reference: str) -> tuple[str, str]:
    """Split ``"pkg.mod:attr"`` into its module and attribute parts."""
    if ":" not in reference:
        raise ConfigurationError(
            f"Invalid backend reference: {reference!r}",
            hint="Expected the form package.module:attr",
        )
    module_name, attr_name = reference.strip().rsplit(":", 1)
    if not module_name or not attr_name:
        raise ConfigurationError(
            f"Invalid backend reference: {reference!r}",
            hint="Expected the form package.module:attr",
        )
    return module_name, attr_name


def load_backend(reference: str | None) -> StatusBackend:
    """Import and instantiate the status backend named by *reference*.

    Raises
    ------
    ConfigurationError
        If *reference* is missing or malformed, the module cannot be
        imported, the attribute does not exist, the factory fails, or the
        resulting object does not satisfy :class:`StatusBackend`.
    """
    if reference is None or not reference.strip():
        raise ConfigurationError("No status backend configured.", hint=_HINT)

    module_name, attr_name = _split_reference(reference)
    logger.debug("Loading status backend %s from %s", attr_name, module_name)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import backend module {module_name!r}: {exc}",
            hint="Is the backend package installed in this environment?",
        ) from exc

    try:
        target: Any = getattr(module, attr_name)
    except AttributeError as exc:
        raise ConfigurationError(
            f"Backend module {module_name!r} has no attribute {attr_name!r}.",
            hint=_HINT,
        ) from exc

    backend: Any = target
    # A class satisfies the protocol check structurally, so test for it first.
    if isinstance(target, type) or (
        callable(target) and not isinstance(target, StatusBackend)
    ):
        try:
            backend = target()
        except Exception as exc:
            raise ConfigurationError(
                f"Backend factory {reference!r} failed: {exc}",
            ) from exc

    if not isinstance(backend, StatusBackend):
        raise ConfigurationError(
            f"{reference!r} does not provide a status backend.",
            hint="The backend must define fetch_batch_status() and fetch_l1_status().",
        )

    logger.debug("Using status backend %s", type(backend).__name__)
    return backend
