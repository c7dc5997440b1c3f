"""Get resource use case."""

from uuid import UUID

from resaccess.domain.entities import RequestingIdentity, Resource
from resaccess.domain.exceptions import NotFound, PermissionDenied
from resaccess.domain.services import can_access
from resaccess.domain.value_objects import AccessOperation


class GetResourceUseCase:
    """Get resource by id if the identity can read it."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, identity: RequestingIdentity, resource_id: UUID) -> Resource:
        """Get resource by id."""
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
        if not resource:
            raise NotFound("Resource", str(resource_id))

        if not can_access(resource.policy, identity, AccessOperation.READ):
            raise PermissionDenied("No read access to resource")

        return resource
