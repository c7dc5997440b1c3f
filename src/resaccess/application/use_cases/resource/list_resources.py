"""List resources use case."""

import logging
from dataclasses import dataclass

from resaccess.domain.entities import RequestingIdentity, Resource
from resaccess.domain.services import FilterExpression, build_access_filter, merge_filters

logger = logging.getLogger(__name__)


@dataclass
class ResourcePage:
    """One page of readable resources."""

    items: list[Resource]
    next_cursor: str | None
    total: int


class ListResourcesUseCase:
    """List the resources an identity can read.

    The access filter is pushed down to the repository so only readable
    rows are loaded. Superusers skip the filter.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        identity: RequestingIdentity,
        conditions: FilterExpression | None = None,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> ResourcePage:
        """List readable resources matching the optional conditions."""
        if identity.is_superuser:
            effective = conditions
        else:
            effective = merge_filters(conditions, build_access_filter(identity))
        logger.debug("Listing resources with conditions %r", effective)

        async with self._uow_factory() as uow:
            items, next_cursor = await uow.resources.list(
                conditions=effective, cursor=cursor, limit=limit
            )
            total = await uow.resources.count(conditions=effective)

        return ResourcePage(items=items, next_cursor=next_cursor, total=total)
