"""Create resource use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from resaccess.application.dto.resource_dto import ResourceCreateInput
from resaccess.domain.entities import AccessPolicy, AuthenticatedIdentity, RequestingIdentity, Resource
from resaccess.domain.exceptions import PermissionDenied, ValidationError

logger = logging.getLogger(__name__)


class CreateResourceUseCase:
    """Create resource owned by the creator.

    The group defaults to ``default_group`` when the creator belongs to it.
    Modifiers left unset are taken from ``default_policy``.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        default_group: str | None = None,
        default_policy: AccessPolicy | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._default_group = default_group
        self._default_policy = default_policy or AccessPolicy()

    async def execute(self, identity: RequestingIdentity, data: ResourceCreateInput) -> Resource:
        """Create resource."""
        if not isinstance(identity, AuthenticatedIdentity):
            raise PermissionDenied("Anonymous users cannot create resources")

        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Resource name is required")

        group_id = data.group_id or None
        if group_id is None and self._default_group in identity.member_group_ids:
            group_id = self._default_group

        defaults = self._default_policy
        policy = AccessPolicy(
            owner_id=identity.profile_id,
            group_id=group_id,
            owner_modifier=data.owner_modifier or defaults.owner_modifier,
            group_modifier=data.group_modifier or defaults.group_modifier,
            all_modifier=data.all_modifier or defaults.all_modifier,
        )

        now = datetime.now(UTC)
        resource = Resource(
            id=uuid4(),
            name=name,
            content=data.content or "",
            policy=policy,
            created_at=now,
            updated_at=now,
        )
        async with self._uow_factory() as uow:
            await uow.resources.create(resource)

        logger.info("Resource %s created by %s", resource.id, identity.profile_id)
        return resource
