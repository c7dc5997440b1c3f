"""PostgreSQL resource repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from resaccess.domain.entities import AccessPolicy, Resource
from resaccess.domain.services import (
    Comparison,
    ComparisonOperator,
    FilterExpression,
    JoinOperator,
    PolicyField,
)
from resaccess.domain.value_objects import PermissionModifier

_COLUMNS: dict[PolicyField, str] = {
    PolicyField.OWNER_ID: "owner_id",
    PolicyField.GROUP_ID: "group_id",
    PolicyField.OWNER_MODIFIER: "owner_modifier",
    PolicyField.GROUP_MODIFIER: "group_modifier",
    PolicyField.ALL_MODIFIER: "all_modifier",
}

_SELECT = (
    "SELECT id, name, content, owner_id, group_id, owner_modifier, group_modifier, "
    "all_modifier, created_at, updated_at FROM resource"
)


def compile_filter(expression: FilterExpression) -> tuple[str, list[object]]:
    """Compile a filter expression into a SQL condition and its params."""
    if isinstance(expression, Comparison):
        column = _COLUMNS[expression.field]
        # Empty ids never match, same as matches().
        if expression.operator is ComparisonOperator.EQ:
            if expression.value is None or expression.value == "":
                return "FALSE", []
            return f"{column} = %s", [str(expression.value)]
        values = sorted(str(v) for v in expression.value if v is not None and v != "")
        if not values:
            return "FALSE", []
        return f"{column} = ANY(%s)", [values]

    parts: list[str] = []
    params: list[object] = []
    for clause in expression.clauses:
        sql, clause_params = compile_filter(clause)
        parts.append(sql)
        params.extend(clause_params)
    glue = " AND " if expression.operator is JoinOperator.AND else " OR "
    return "(" + glue.join(parts) + ")", params


def _row_to_resource(r: tuple) -> Resource:
    return Resource(
        id=r[0],
        name=r[1],
        content=r[2],
        policy=AccessPolicy(
            owner_id=r[3],
            group_id=r[4],
            owner_modifier=PermissionModifier(r[5]),
            group_modifier=PermissionModifier(r[6]),
            all_modifier=PermissionModifier(r[7]),
        ),
        created_at=r[8],
        updated_at=r[9],
    )


class PostgresResourceRepository:
    """Resource repository implementation with access filter push-down."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, resource_id: UUID) -> Resource | None:
        """Get resource by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE id = %s", (resource_id,))
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_resource(r)

    async def list(
        self,
        *,
        conditions: FilterExpression | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]:
        """List resources matching conditions with cursor pagination."""
        where_parts: list[str] = []
        _params: list[object] = []
        if conditions is not None:
            sql, filter_params = compile_filter(conditions)
            where_parts.append(sql)
            _params.extend(filter_params)
        if cursor:
            where_parts.append("id > %s")
            _params.append(UUID(cursor))
        where = (" WHERE " + " AND ".join(where_parts)) if where_parts else ""
        params = tuple(_params) + (limit + 1,)
        cur = await self._conn.execute(f"{_SELECT}{where} ORDER BY id LIMIT %s", params)
        rows = await cur.fetchall()
        resources = [_row_to_resource(r) for r in rows[:limit]]
        next_cursor = str(rows[limit - 1][0]) if len(rows) > limit else None
        return resources, next_cursor

    async def count(self, *, conditions: FilterExpression | None = None) -> int:
        """Count resources matching conditions."""
        q = "SELECT COUNT(*) FROM resource"
        params: list[object] = []
        if conditions is not None:
            sql, params = compile_filter(conditions)
            q += f" WHERE {sql}"
        cur = await self._conn.execute(q, params)
        r = await cur.fetchone()
        return int(r[0]) if r else 0

    async def create(self, resource: Resource) -> Resource:
        """Create resource."""
        p = resource.policy
        await self._conn.execute(
            "INSERT INTO resource (id, name, content, owner_id, group_id, owner_modifier, "
            "group_modifier, all_modifier, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                resource.id,
                resource.name,
                resource.content,
                p.owner_id,
                p.group_id,
                p.owner_modifier.value,
                p.group_modifier.value,
                p.all_modifier.value,
                resource.created_at,
                resource.updated_at,
            ),
        )
        return resource

    async def update(self, resource: Resource) -> None:
        """Update resource."""
        p = resource.policy
        await self._conn.execute(
            "UPDATE resource SET name=%s, content=%s, owner_id=%s, group_id=%s, "
            "owner_modifier=%s, group_modifier=%s, all_modifier=%s, updated_at=%s WHERE id=%s",
            (
                resource.name,
                resource.content,
                p.owner_id,
                p.group_id,
                p.owner_modifier.value,
                p.group_modifier.value,
                p.all_modifier.value,
                resource.updated_at,
                resource.id,
            ),
        )

    async def delete(self, resource_id: UUID) -> None:
        """Delete resource."""
        await self._conn.execute("DELETE FROM resource WHERE id = %s", (resource_id,))
