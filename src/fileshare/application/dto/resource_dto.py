"""Resource DTOs."""

from dataclasses import dataclass


@dataclass
class ResourceCreateInput:
    """Input for registering a resource."""

    name: str
    mimetype: str | None = None
    size: int = 0


@dataclass
class ResourceUpdateInput:
    """Partial update of resource metadata. None leaves a field unchanged."""

    name: str | None = None
    mimetype: str | None = None
    size: int | None = None
