"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from resaccess.interfaces.api.resources.health import HealthResource
from resaccess.interfaces.api.resources.resources import (
    ResourceAccessResource,
    ResourceResource,
    ResourcesResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unexpected exceptions and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    resources_resource: ResourcesResource,
    resource_resource: ResourceResource,
    access_resource: ResourceAccessResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/resources", resources_resource)
    app.add_route("/v1/resources/{resource_id}", resource_resource)
    app.add_route("/v1/resources/{resource_id}/access", access_resource)
    return app
