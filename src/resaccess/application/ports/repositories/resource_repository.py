"""Resource repository port."""

from typing import Protocol
from uuid import UUID

from resaccess.domain.entities import Resource
from resaccess.domain.services import FilterExpression


class ResourceRepository(Protocol):
    """Port for resource persistence."""

    async def get_by_id(self, resource_id: UUID) -> Resource | None: ...

    async def list(
        self,
        *,
        conditions: FilterExpression | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]: ...

    async def count(self, *, conditions: FilterExpression | None = None) -> int: ...

    async def create(self, resource: Resource) -> Resource: ...

    async def update(self, resource: Resource) -> None: ...

    async def delete(self, resource_id: UUID) -> None: ...
