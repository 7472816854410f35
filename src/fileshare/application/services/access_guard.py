"""Access guard - request-boundary enforcement of permission decisions."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from fileshare.application.ports import PermissionEvaluator
from fileshare.domain.exceptions import EvaluationUnavailable, Forbidden, Unauthenticated
from fileshare.domain.value_objects import DenialReason, PermissionLevel

logger = logging.getLogger(__name__)


def resolve_resource_reference(
    key: str,
    path_params: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    body: Any = None,
) -> str | None:
    """Find the target resource id: path parameter, then query, then body field.

    The first non-empty value wins. Returns None if no location carries one.
    """
    sources = [path_params, query_params, body if isinstance(body, Mapping) else None]
    for source in sources:
        if not source:
            continue
        value = source.get(key)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            return value
    return None


class AccessGuard:
    """Applies the evaluator's decision before a protected operation runs.

    Fails closed: missing principal, missing reference, store errors and
    timeouts never let the operation through.
    """

    def __init__(
        self,
        permission_evaluator: PermissionEvaluator,
        timeout: float | None = None,
    ) -> None:
        self._evaluator = permission_evaluator
        self._timeout = timeout

    async def enforce(
        self,
        principal_id: str | None,
        resource_ref: str | UUID | None,
        required_level: PermissionLevel | None,
    ) -> str:
        """Return principal_id if allowed, raise otherwise.

        Raises Unauthenticated, Forbidden (with the denial reason) or
        EvaluationUnavailable.
        """
        if not principal_id:
            raise Unauthenticated("User not authenticated")

        if required_level is None:
            return principal_id

        if resource_ref is None or resource_ref == "":
            self._log_denial(principal_id, None, required_level, DenialReason.MISSING_RESOURCE_REFERENCE)
            raise Forbidden(DenialReason.MISSING_RESOURCE_REFERENCE)

        resource_id = _as_resource_id(resource_ref)
        if resource_id is None:
            self._log_denial(principal_id, resource_ref, required_level, DenialReason.RESOURCE_NOT_FOUND)
            raise Forbidden(DenialReason.RESOURCE_NOT_FOUND)

        try:
            decision = await asyncio.wait_for(
                self._evaluator.evaluate(principal_id, resource_id, required_level),
                timeout=self._timeout,
            )
        except TimeoutError as exc:
            logger.error(
                "Permission evaluation timed out after %ss for resource %s",
                self._timeout,
                resource_id,
            )
            raise EvaluationUnavailable("Permission evaluation timed out") from exc

        if decision.allowed:
            return principal_id

        self._log_denial(
            principal_id, resource_id, required_level, decision.reason, decision.held_level
        )
        raise Forbidden(decision.reason)

    @staticmethod
    def _log_denial(
        principal_id: str,
        resource_ref: object,
        required_level: PermissionLevel,
        reason: DenialReason,
        held_level: PermissionLevel | None = None,
    ) -> None:
        logger.info(
            "Access denied: principal=%s resource=%s required=%s held=%s reason=%s",
            principal_id,
            resource_ref,
            required_level,
            held_level,
            reason,
        )


def _as_resource_id(resource_ref: str | UUID) -> UUID | None:
    if isinstance(resource_ref, UUID):
        return resource_ref
    try:
        return UUID(resource_ref)
    except ValueError:
        return None
