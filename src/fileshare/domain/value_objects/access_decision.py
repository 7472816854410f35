"""Access decision returned by permission evaluation."""

from dataclasses import dataclass

from fileshare.domain.value_objects.denial_reason import DenialReason
from fileshare.domain.value_objects.permission_level import PermissionLevel


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of evaluating one (principal, resource, level) triple.

    held_level is the level the principal actually has (OWNER for the owner,
    the grant level otherwise), or None when nothing is held.
    """

    allowed: bool
    required_level: PermissionLevel
    reason: DenialReason | None = None
    held_level: PermissionLevel | None = None

    @classmethod
    def allow(
        cls, required_level: PermissionLevel, held_level: PermissionLevel
    ) -> "AccessDecision":
        return cls(allowed=True, required_level=required_level, held_level=held_level)

    @classmethod
    def deny(
        cls,
        required_level: PermissionLevel,
        reason: DenialReason,
        held_level: PermissionLevel | None = None,
    ) -> "AccessDecision":
        return cls(
            allowed=False,
            required_level=required_level,
            reason=reason,
            held_level=held_level,
        )

    def __bool__(self) -> bool:
        return self.allowed
