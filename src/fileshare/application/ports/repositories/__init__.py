"""Repository ports."""

from fileshare.application.ports.repositories.grant_repository import GrantRepository
from fileshare.application.ports.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "GrantRepository",
    "ResourceRepository",
]
