"""Update resource use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from resaccess.application.dto.resource_dto import ResourceUpdateInput
from resaccess.domain.entities import AuthenticatedIdentity, RequestingIdentity, Resource
from resaccess.domain.exceptions import NotFound, PermissionDenied, ValidationError
from resaccess.domain.services import can_access
from resaccess.domain.value_objects import AccessOperation

logger = logging.getLogger(__name__)


def _is_owner(identity: RequestingIdentity, resource: Resource) -> bool:
    return (
        isinstance(identity, AuthenticatedIdentity)
        and bool(resource.policy.owner_id)
        and identity.profile_id == resource.policy.owner_id
    )


class UpdateResourceUseCase:
    """Update resource content and access policy.

    Requires write access. Changing owner or group additionally requires the
    identity to be the current owner or a superuser. An empty ``group_id``
    removes the group.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        identity: RequestingIdentity,
        resource_id: UUID,
        data: ResourceUpdateInput,
    ) -> Resource:
        """Apply changes and return the updated resource."""
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
            if not resource:
                raise NotFound("Resource", str(resource_id))

            if not can_access(resource.policy, identity, AccessOperation.WRITE):
                raise PermissionDenied("No write access to resource")

            policy = resource.policy
            changes_ownership = (
                data.owner_id is not None and data.owner_id.strip() != policy.owner_id
            ) or (
                data.group_id is not None and (data.group_id or None) != policy.group_id
            )
            if changes_ownership and not (identity.is_superuser or _is_owner(identity, resource)):
                raise PermissionDenied("Only the owner can change owner or group")

            if data.owner_id is not None:
                if not data.owner_id.strip():
                    raise ValidationError("Owner cannot be empty")
                policy = replace(policy, owner_id=data.owner_id.strip())
            if data.group_id is not None:
                policy = replace(policy, group_id=data.group_id or None)
            if data.owner_modifier is not None:
                policy = replace(policy, owner_modifier=data.owner_modifier)
            if data.group_modifier is not None:
                policy = replace(policy, group_modifier=data.group_modifier)
            if data.all_modifier is not None:
                policy = replace(policy, all_modifier=data.all_modifier)

            name = resource.name
            if data.name is not None:
                name = data.name.strip()
                if not name:
                    raise ValidationError("Resource name is required")

            updated = replace(
                resource,
                name=name,
                content=data.content if data.content is not None else resource.content,
                policy=policy,
                updated_at=datetime.now(UTC),
            )
            await uow.resources.update(updated)

        logger.info("Resource %s updated", resource_id)
        return updated
