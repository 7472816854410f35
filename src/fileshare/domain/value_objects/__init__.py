"""Domain value objects."""

from fileshare.domain.value_objects.access_decision import AccessDecision
from fileshare.domain.value_objects.denial_reason import DenialReason
from fileshare.domain.value_objects.permission_level import (
    NONE_LEVEL,
    PermissionLevel,
    parse_grant_level,
)

__all__ = [
    "AccessDecision",
    "DenialReason",
    "NONE_LEVEL",
    "PermissionLevel",
    "parse_grant_level",
]
