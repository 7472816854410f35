"""Unit tests for domain exceptions."""

import pytest

from fileshare.domain.exceptions import (
    EvaluationUnavailable,
    FileShareError,
    Forbidden,
    NotFound,
    StoreUnavailable,
    Unauthenticated,
    ValidationError,
)
from fileshare.domain.value_objects import DenialReason


@pytest.mark.parametrize(
    "exc_type",
    [EvaluationUnavailable, Forbidden, NotFound, StoreUnavailable, Unauthenticated, ValidationError],
)
def test_exceptions_inherit_fileshare_error(exc_type) -> None:
    """Every domain exception is a FileShareError."""
    assert issubclass(exc_type, FileShareError)


def test_forbidden_carries_reason_with_generic_message() -> None:
    """Forbidden keeps the precise reason but a generic message."""
    exc = Forbidden(DenialReason.NO_GRANT)
    assert exc.reason is DenialReason.NO_GRANT
    assert str(exc) == "Permission denied"
    assert "no_grant" not in str(exc)


def test_raise_not_found_catchable_as_fileshare_error() -> None:
    """NotFound can be caught as FileShareError."""
    with pytest.raises(FileShareError):
        raise NotFound("Resource", "123")
