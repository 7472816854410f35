"""Permission grant entity - non-owner access to a resource."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from fileshare.domain.value_objects import PermissionLevel


@dataclass
class PermissionGrant:
    """Grant - principal holds level on resource. One row per (resource, principal)."""

    resource_id: UUID
    principal_id: str
    level: PermissionLevel
    created_at: datetime
    updated_at: datetime
    created_by: str | None = None
