"""JSON shapes shared by API resources."""

from fileshare.domain.entities import PermissionGrant, Resource


def resource_to_dict(resource: Resource) -> dict:
    return {
        "id": str(resource.id),
        "owner_id": resource.owner_id,
        "name": resource.name,
        "mimetype": resource.mimetype,
        "size": resource.size,
        "created_at": resource.created_at.isoformat(),
        "updated_at": resource.updated_at.isoformat(),
    }


def grant_to_dict(grant: PermissionGrant) -> dict:
    return {
        "resource_id": str(grant.resource_id),
        "principal_id": grant.principal_id,
        "level": grant.level.value,
        "created_at": grant.created_at.isoformat(),
        "updated_at": grant.updated_at.isoformat(),
    }
