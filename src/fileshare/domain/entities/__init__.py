"""Domain entities."""

from fileshare.domain.entities.grant import PermissionGrant
from fileshare.domain.entities.resource import Resource

__all__ = [
    "PermissionGrant",
    "Resource",
]
