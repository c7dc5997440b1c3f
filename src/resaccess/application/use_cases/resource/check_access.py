"""Check access use case."""

from uuid import UUID

from resaccess.domain.entities import RequestingIdentity
from resaccess.domain.exceptions import NotFound
from resaccess.domain.services import can_access
from resaccess.domain.value_objects import AccessOperation


class CheckAccessUseCase:
    """Report whether an identity may perform an operation on a resource."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        identity: RequestingIdentity,
        resource_id: UUID,
        operation: AccessOperation,
    ) -> bool:
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
        if not resource:
            raise NotFound("Resource", str(resource_id))
        return can_access(resource.policy, identity, operation)
