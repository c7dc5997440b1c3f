"""Resource API resources."""

from uuid import UUID

import falcon.asgi

from resaccess.application.dto.resource_dto import ResourceCreateInput, ResourceUpdateInput
from resaccess.application.use_cases.resource.check_access import CheckAccessUseCase
from resaccess.application.use_cases.resource.create_resource import CreateResourceUseCase
from resaccess.application.use_cases.resource.delete_resource import DeleteResourceUseCase
from resaccess.application.use_cases.resource.get_resource import GetResourceUseCase
from resaccess.application.use_cases.resource.list_resources import ListResourcesUseCase
from resaccess.application.use_cases.resource.update_resource import UpdateResourceUseCase
from resaccess.domain.entities import Resource
from resaccess.domain.exceptions import NotFound, PermissionDenied, ValidationError
from resaccess.domain.services import FilterExpression, PolicyField, and_, eq
from resaccess.domain.value_objects import (
    AccessOperation,
    PermissionModifier,
    format_letter_modifiers,
    format_numeric_modifiers,
    parse_letter_modifiers,
    parse_numeric_modifiers,
)


def _resource_to_media(resource: Resource) -> dict:
    p = resource.policy
    return {
        "id": str(resource.id),
        "name": resource.name,
        "content": resource.content,
        "owner_id": p.owner_id,
        "group_id": p.group_id,
        "owner_modifier": p.owner_modifier.value,
        "group_modifier": p.group_modifier.value,
        "all_modifier": p.all_modifier.value,
        "modifiers": format_letter_modifiers(p.owner_modifier, p.group_modifier, p.all_modifier),
        "mode": format_numeric_modifiers(p.owner_modifier, p.group_modifier, p.all_modifier),
        "created_at": resource.created_at.isoformat(),
        "updated_at": resource.updated_at.isoformat(),
    }


def _parse_modifiers(body: dict) -> dict[str, PermissionModifier]:
    """Read modifiers from ``modifiers`` (letters), ``mode`` (digits) or per-tier fields.

    Per-tier fields win over the compact notations. Raises ValueError.
    """
    result: dict[str, PermissionModifier] = {}
    if body.get("modifiers") is not None:
        triple = parse_letter_modifiers(str(body["modifiers"]))
    elif body.get("mode") is not None:
        triple = parse_numeric_modifiers(str(body["mode"]))
    else:
        triple = None
    if triple:
        result.update(owner_modifier=triple[0], group_modifier=triple[1], all_modifier=triple[2])
    for key in ("owner_modifier", "group_modifier", "all_modifier"):
        if body.get(key) is not None:
            result[key] = PermissionModifier(body[key])
    return result


def _parse_id(resource_id: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(resource_id)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid resource ID"}
        return None


def _identity(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    identity = getattr(req.context, "identity", None)
    if identity is None:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return identity


def _optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


async def _read_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


class ResourcesResource:
    """GET/POST /v1/resources - list readable resources and create."""

    def __init__(
        self,
        list_resources: ListResourcesUseCase,
        create_resource: CreateResourceUseCase,
    ) -> None:
        self._list = list_resources
        self._create = create_resource

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List resources the identity can read. Optional ``owner`` and ``group`` filters."""
        identity = _identity(req, resp)
        if identity is None:
            return

        clauses: list[FilterExpression] = []
        if owner := req.get_param("owner"):
            clauses.append(eq(PolicyField.OWNER_ID, owner))
        if group := req.get_param("group"):
            clauses.append(eq(PolicyField.GROUP_ID, group))
        conditions = and_(*clauses) if clauses else None

        cursor = req.get_param("cursor")
        if cursor:
            try:
                UUID(cursor)
            except ValueError:
                resp.status = falcon.HTTP_400
                resp.media = {"error": "Invalid cursor"}
                return
        limit = req.get_param_as_int("limit") or 20
        limit = min(max(limit, 1), 100)

        page = await self._list.execute(identity, conditions, cursor=cursor, limit=limit)
        resp.media = {
            "items": [_resource_to_media(r) for r in page.items],
            "next_cursor": page.next_cursor,
            "total": page.total,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create resource owned by the identity."""
        identity = _identity(req, resp)
        if identity is None:
            return

        try:
            body = await _read_body(req)
            data = ResourceCreateInput(
                name=_optional_str(body, "name") or "",
                content=_optional_str(body, "content") or "",
                group_id=_optional_str(body, "group_id") or None,
                **_parse_modifiers(body),
            )
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            resource = await self._create.execute(identity, data)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _resource_to_media(resource)
        resp.status = falcon.HTTP_201


class ResourceResource:
    """GET/PATCH/DELETE /v1/resources/{resource_id}."""

    def __init__(
        self,
        get_resource: GetResourceUseCase,
        update_resource: UpdateResourceUseCase,
        delete_resource: DeleteResourceUseCase,
    ) -> None:
        self._get = get_resource
        self._update = update_resource
        self._delete = delete_resource

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str
    ) -> None:
        """Get resource if readable."""
        identity = _identity(req, resp)
        if identity is None:
            return
        res_id = _parse_id(resource_id, resp)
        if res_id is None:
            return

        try:
            resource = await self._get.execute(identity, res_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = _resource_to_media(resource)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str
    ) -> None:
        """Update content or access policy. Requires write access."""
        identity = _identity(req, resp)
        if identity is None:
            return
        res_id = _parse_id(resource_id, resp)
        if res_id is None:
            return

        try:
            body = await _read_body(req)
            data = ResourceUpdateInput(
                name=_optional_str(body, "name"),
                content=_optional_str(body, "content"),
                owner_id=_optional_str(body, "owner_id"),
                group_id=_optional_str(body, "group_id"),
                **_parse_modifiers(body),
            )
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            resource = await self._update.execute(identity, res_id, data)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _resource_to_media(resource)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str
    ) -> None:
        """Delete resource. Requires write access."""
        identity = _identity(req, resp)
        if identity is None:
            return
        res_id = _parse_id(resource_id, resp)
        if res_id is None:
            return

        try:
            await self._delete.execute(identity, res_id)
            resp.status = falcon.HTTP_204
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}


class ResourceAccessResource:
    """GET /v1/resources/{resource_id}/access?operation=read|write."""

    def __init__(self, check_access: CheckAccessUseCase) -> None:
        self._check = check_access

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str
    ) -> None:
        """Report whether the identity may perform the operation."""
        identity = _identity(req, resp)
        if identity is None:
            return
        res_id = _parse_id(resource_id, resp)
        if res_id is None:
            return

        try:
            operation = AccessOperation(req.get_param("operation") or AccessOperation.READ)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Operation must be 'read' or 'write'"}
            return

        try:
            allowed = await self._check.execute(identity, res_id, operation)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Resource not found"}
            return

        resp.media = {"operation": operation.value, "allowed": allowed}
        resp.status = falcon.HTTP_200
