"""Application entry point and composition root."""

import logging

from resaccess import __version__
from resaccess.application.use_cases.identity.resolve_identity import IdentityResolver
from resaccess.application.use_cases.resource.check_access import CheckAccessUseCase
from resaccess.application.use_cases.resource.create_resource import CreateResourceUseCase
from resaccess.application.use_cases.resource.delete_resource import DeleteResourceUseCase
from resaccess.application.use_cases.resource.get_resource import GetResourceUseCase
from resaccess.application.use_cases.resource.list_resources import ListResourcesUseCase
from resaccess.application.use_cases.resource.update_resource import UpdateResourceUseCase
from resaccess.config import Settings, get_settings
from resaccess.domain.entities import AccessPolicy
from resaccess.infrastructure.auth.keycloak_provider import KeycloakProvider
from resaccess.infrastructure.persistence.postgres.connection import create_pool
from resaccess.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from resaccess.interfaces.api.app import create_app
from resaccess.interfaces.api.middleware.auth import AuthMiddleware
from resaccess.interfaces.api.middleware.cors import CORSMiddleware
from resaccess.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from resaccess.interfaces.api.resources.health import HealthResource
from resaccess.interfaces.api.resources.resources import (
    ResourceAccessResource,
    ResourceResource,
    ResourcesResource,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_resaccess_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

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
    if keycloak is None:
        logger.warning("Keycloak client secret not set, only anonymous access is possible")

    identity_resolver = IdentityResolver(uow_factory, superuser_role=settings.superuser_role)
    default_policy = AccessPolicy(
        owner_modifier=settings.default_owner_modifier,
        group_modifier=settings.default_group_modifier,
        all_modifier=settings.default_all_modifier,
    )

    resources_resource = ResourcesResource(
        ListResourcesUseCase(uow_factory),
        CreateResourceUseCase(
            uow_factory,
            default_group=settings.default_group,
            default_policy=default_policy,
        ),
    )
    resource_resource = ResourceResource(
        GetResourceUseCase(uow_factory),
        UpdateResourceUseCase(uow_factory),
        DeleteResourceUseCase(uow_factory),
    )
    access_resource = ResourceAccessResource(CheckAccessUseCase(uow_factory))

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = create_app(
        resources_resource,
        resource_resource,
        access_resource,
        HealthResource(),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(identity_resolver, keycloak),
        ],
    )
    logger.info("ResAccess v%s ready (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_resaccess_app(), host="0.0.0.0", port=8000)
