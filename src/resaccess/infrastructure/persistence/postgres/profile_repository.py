"""PostgreSQL profile repository implementation."""

from psycopg import AsyncConnection

from resaccess.domain.entities import Profile


class PostgresProfileRepository:
    """Profile repository - profiles with their group memberships."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_username(self, username: str) -> Profile | None:
        """Get profile by username, including group ids."""
        cur = await self._conn.execute(
            "SELECT username, email, full_name, superuser, created_at, last_access "
            "FROM profile WHERE username = %s",
            (username,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        cur = await self._conn.execute(
            "SELECT group_id FROM profile_group WHERE username = %s ORDER BY group_id",
            (username,),
        )
        groups = [g[0] for g in await cur.fetchall()]
        return Profile(
            username=r[0],
            email=r[1],
            full_name=r[2],
            superuser=bool(r[3]),
            groups=groups,
            created_at=r[4],
            last_access=r[5],
        )
