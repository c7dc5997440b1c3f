"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from resaccess.application.use_cases.identity.resolve_identity import IdentityResolver
from resaccess.application.use_cases.resource.check_access import CheckAccessUseCase
from resaccess.application.use_cases.resource.create_resource import CreateResourceUseCase
from resaccess.application.use_cases.resource.delete_resource import DeleteResourceUseCase
from resaccess.application.use_cases.resource.get_resource import GetResourceUseCase
from resaccess.application.use_cases.resource.list_resources import ListResourcesUseCase
from resaccess.application.use_cases.resource.update_resource import UpdateResourceUseCase
from resaccess.domain.entities import Profile
from resaccess.infrastructure.auth.keycloak_provider import OIDCUser
from resaccess.interfaces.api.app import create_app
from resaccess.interfaces.api.middleware.auth import AuthMiddleware
from resaccess.interfaces.api.resources.health import HealthResource
from resaccess.interfaces.api.resources.resources import (
    ResourceAccessResource,
    ResourceResource,
    ResourcesResource,
)

from tests.conftest import FakeUnitOfWork, make_uow_factory


class FakeKeycloakProvider:
    """Accepts ``token-<username>`` bearer tokens."""

    def decode_token(self, token: str) -> OIDCUser | None:
        if not token.startswith("token-"):
            return None
        username = token[len("token-"):]
        roles = ["superuser"] if username == "root" else []
        return OIDCUser(user_id=f"sub-{username}", username=username, realm_roles=roles)


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """UoW shared by all requests in a test, with bob/carol/dave profiles."""
    uow = FakeUnitOfWork()
    uow.profiles.add_profile(Profile(username="bob", groups=["user"]))
    uow.profiles.add_profile(Profile(username="carol", groups=["staff"]))
    uow.profiles.add_profile(Profile(username="dave"))
    return uow


@pytest.fixture
def app(api_uow):
    """Falcon ASGI app wired with fake persistence and token validation."""
    uow_factory = make_uow_factory(api_uow)
    resolver = IdentityResolver(uow_factory, superuser_role="superuser")
    return create_app(
        ResourcesResource(
            ListResourcesUseCase(uow_factory),
            CreateResourceUseCase(uow_factory, default_group="user"),
        ),
        ResourceResource(
            GetResourceUseCase(uow_factory),
            UpdateResourceUseCase(uow_factory),
            DeleteResourceUseCase(uow_factory),
        ),
        ResourceAccessResource(CheckAccessUseCase(uow_factory)),
        HealthResource(),
        middleware=[AuthMiddleware(resolver, FakeKeycloakProvider())],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
