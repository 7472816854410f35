"""Domain exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fileshare.domain.value_objects.denial_reason import DenialReason


class FileShareError(Exception):
    """Base exception for fileshare."""

    pass


class Unauthenticated(FileShareError):
    """No principal could be resolved for the request."""

    pass


class Forbidden(FileShareError):
    """Principal is not allowed to perform the requested operation.

    The reason is kept for logging; callers only ever see a generic denial.
    """

    def __init__(self, reason: "DenialReason", message: str = "Permission denied") -> None:
        super().__init__(message)
        self.reason = reason


class EvaluationUnavailable(FileShareError):
    """Permission evaluation could not complete (store failure or timeout)."""

    pass


class StoreUnavailable(FileShareError):
    """Persistence backend failed while serving a request."""

    pass


class NotFound(FileShareError):
    """Requested resource was not found."""

    pass


class ValidationError(FileShareError):
    """Validation failed for input data."""

    pass
