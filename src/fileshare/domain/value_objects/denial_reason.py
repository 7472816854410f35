"""Reasons a permission evaluation can deny."""

from enum import StrEnum


class DenialReason(StrEnum):
    """Why access was denied."""

    RESOURCE_NOT_FOUND = "resource_not_found"
    MISSING_RESOURCE_REFERENCE = "missing_resource_reference"
    NOT_OWNER = "not_owner"
    NO_GRANT = "no_grant"
    INSUFFICIENT_LEVEL = "insufficient_level"
