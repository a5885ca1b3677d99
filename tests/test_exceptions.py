"""Tests for the exception hierarchies and batch error conversion."""

from __future__ import annotations

import pytest

from prover_cli.exceptions import (
    BatchBackendUnavailableError,
    BatchError,
    BatchLookupError,
    BatchNotFoundError,
    CLIErrors,
    ConfigurationError,
    ConnectionFailedError,
    EnvironmentError,
    InvalidArgumentsError,
    InvalidBatchArgsError,
    NotFoundError,
    QueryError,
    to_cli_error,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_class",
        [
            NotFoundError,
            InvalidArgumentsError,
            QueryError,
            ConnectionFailedError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_cli_variants_inherit_from_base(self, exc_class: type[CLIErrors]) -> None:
        assert issubclass(exc_class, CLIErrors)

    @pytest.mark.parametrize(
        "exc_class",
        [
            BatchNotFoundError,
            InvalidBatchArgsError,
            BatchLookupError,
            BatchBackendUnavailableError,
        ],
    )
    def test_batch_errors_are_not_cli_errors(self, exc_class: type[BatchError]) -> None:
        assert issubclass(exc_class, BatchError)
        assert not issubclass(exc_class, CLIErrors)

    def test_hint_is_stored(self) -> None:
        err = CLIErrors("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"
        assert err.batch_numbers == ()

    def test_hint_defaults_to_none(self) -> None:
        assert CLIErrors("boom").hint is None


class TestConversion:
    @pytest.mark.parametrize(
        ("native", "expected"),
        [
            (BatchNotFoundError, NotFoundError),
            (InvalidBatchArgsError, InvalidArgumentsError),
            (BatchLookupError, QueryError),
            (BatchBackendUnavailableError, ConnectionFailedError),
            (BatchError, QueryError),
        ],
    )
    def test_each_kind_maps_to_one_variant(
        self, native: type[BatchError], expected: type[CLIErrors],
    ) -> None:
        converted = to_cli_error(native("failure"))
        assert type(converted) is expected

    def test_message_hint_and_batches_preserved(self) -> None:
        native = BatchNotFoundError("No such batch: 4, 5", hint="h", batch_numbers=(4, 5))
        converted = to_cli_error(native)
        assert str(converted) == "No such batch: 4, 5"
        assert converted.hint == "h"
        assert converted.batch_numbers == (4, 5)

    def test_unregistered_subclass_uses_nearest_base(self) -> None:
        class StaleSnapshotError(BatchLookupError):
            pass

        assert type(to_cli_error(StaleSnapshotError("stale"))) is QueryError
