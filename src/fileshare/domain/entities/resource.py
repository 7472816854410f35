"""Resource entity - a shared file."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Resource:
    """Resource - file metadata with exactly one owner."""

    id: UUID
    owner_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    mimetype: str | None = None
    size: int = 0
