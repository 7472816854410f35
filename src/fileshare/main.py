"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from fileshare import __version__
from fileshare.application.services.access_guard import AccessGuard
from fileshare.application.use_cases.access.check_access import CheckAccessUseCase
from fileshare.application.use_cases.grant.list_grants import ListGrantsUseCase
from fileshare.application.use_cases.grant.revoke_grant import RevokeGrantUseCase
from fileshare.application.use_cases.grant.set_grant import SetGrantUseCase
from fileshare.application.use_cases.resource.create_resource import CreateResourceUseCase
from fileshare.application.use_cases.resource.delete_resource import DeleteResourceUseCase
from fileshare.application.use_cases.resource.get_resource import GetResourceUseCase
from fileshare.application.use_cases.resource.list_resources import ListResourcesUseCase
from fileshare.application.use_cases.resource.update_resource import UpdateResourceUseCase
from fileshare.config import Settings, get_settings
from fileshare.infrastructure.auth.keycloak_provider import KeycloakProvider
from fileshare.infrastructure.permission.permission_evaluator import StorePermissionEvaluator
from fileshare.infrastructure.persistence.postgres.connection import create_pool
from fileshare.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from fileshare.interfaces.api.app import ApiResources, create_app
from fileshare.interfaces.api.middleware.access_guard import AccessGuardMiddleware
from fileshare.interfaces.api.middleware.auth import AuthMiddleware
from fileshare.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from fileshare.interfaces.api.resources.access import AccessCheckResource
from fileshare.interfaces.api.resources.health import HealthResource
from fileshare.interfaces.api.resources.permissions import (
    PermissionRevokeResource,
    PermissionsResource,
)
from fileshare.interfaces.api.resources.resources import ResourceItemResource, ResourcesResource

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_api(uow_factory, access_guard: AccessGuard, evaluator, pool=None) -> ApiResources:
    """Wire use cases into API resources."""
    return ApiResources(
        resources=ResourcesResource(
            ListResourcesUseCase(unit_of_work_factory=uow_factory),
            CreateResourceUseCase(unit_of_work_factory=uow_factory),
        ),
        resource_item=ResourceItemResource(
            GetResourceUseCase(unit_of_work_factory=uow_factory),
            UpdateResourceUseCase(unit_of_work_factory=uow_factory),
            DeleteResourceUseCase(unit_of_work_factory=uow_factory),
        ),
        permissions=PermissionsResource(
            ListGrantsUseCase(unit_of_work_factory=uow_factory, access_guard=access_guard),
            SetGrantUseCase(unit_of_work_factory=uow_factory, access_guard=access_guard),
        ),
        permission_revoke=PermissionRevokeResource(
            RevokeGrantUseCase(unit_of_work_factory=uow_factory, access_guard=access_guard),
        ),
        access_check=AccessCheckResource(CheckAccessUseCase(permission_evaluator=evaluator)),
        health=HealthResource(pool),
    )


def create_fileshare_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None and settings.trust_bearer_subject:
        if settings.environment == "production":
            raise RuntimeError("trust_bearer_subject must not be enabled in production")
        logger.warning("Keycloak not configured; bearer tokens are trusted as principal ids")

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    evaluator = StorePermissionEvaluator(uow_factory)
    access_guard = AccessGuard(evaluator, timeout=settings.authorization_timeout_seconds)

    api = build_api(uow_factory, access_guard, evaluator, pool)
    return create_app(
        api,
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, trust_bearer_subject=settings.trust_bearer_subject),
            AccessGuardMiddleware(access_guard),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("fileshare v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(
        create_fileshare_app(settings),
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
