"""Profile repository port."""

from typing import Protocol

from resaccess.domain.entities import Profile


class ProfileRepository(Protocol):
    """Port for reading profiles and their group memberships."""

    async def get_by_username(self, username: str) -> Profile | None: ...
