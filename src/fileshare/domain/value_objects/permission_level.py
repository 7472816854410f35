"""Ordered permission levels."""

from enum import StrEnum

from fileshare.domain.exceptions import ValidationError

NONE_LEVEL = "none"


class PermissionLevel(StrEnum):
    """Access levels on a resource, ordered read < write < delete < owner.

    A held level implies every lower one. OWNER is derived from resource
    ownership and is never stored as a grant.
    """

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_grantable(self) -> bool:
        return self is not PermissionLevel.OWNER

    def satisfies(self, required: "PermissionLevel") -> bool:
        """True if holding this level grants the required one."""
        return self.rank >= required.rank


_RANKS = {
    PermissionLevel.READ: 1,
    PermissionLevel.WRITE: 2,
    PermissionLevel.DELETE: 3,
    PermissionLevel.OWNER: 4,
}


def parse_grant_level(value: str | None) -> PermissionLevel | None:
    """Parse a grant level from client input; "none" means no grant.

    Raises ValidationError for unknown values and for "owner", which cannot be granted.
    """
    if value is None:
        raise ValidationError("Missing permission level")
    if not isinstance(value, str):
        raise ValidationError(f"Permission level must be a string: {value!r}")
    normalized = value.strip().lower()
    if normalized == NONE_LEVEL:
        return None
    try:
        level = PermissionLevel(normalized)
    except ValueError:
        raise ValidationError(f"Unknown permission level: {value}") from None
    if not level.is_grantable:
        raise ValidationError("Ownership cannot be granted")
    return level
