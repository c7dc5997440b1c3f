"""Delete resource use case."""

import logging
from uuid import UUID

from resaccess.domain.entities import RequestingIdentity
from resaccess.domain.exceptions import NotFound, PermissionDenied
from resaccess.domain.services import can_access
from resaccess.domain.value_objects import AccessOperation

logger = logging.getLogger(__name__)


class DeleteResourceUseCase:
    """Delete resource. Requires write access."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, identity: RequestingIdentity, resource_id: UUID) -> None:
        """Delete resource by id."""
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id)
            if not resource:
                raise NotFound("Resource", str(resource_id))

            if not can_access(resource.policy, identity, AccessOperation.WRITE):
                raise PermissionDenied("No write access to resource")

            await uow.resources.delete(resource_id)

        logger.info("Resource %s deleted", resource_id)
