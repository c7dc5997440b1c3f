"""Resolve identity use case - builds the requesting identity for a caller."""

import logging

from resaccess.domain.entities import ANONYMOUS, AuthenticatedIdentity, RequestingIdentity

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Build a RequestingIdentity from a token subject and the stored profile.

    Superuser comes from the profile flag or the configured realm role.
    Subjects without a stored profile get an identity with no groups.
    """

    def __init__(self, unit_of_work_factory: type, superuser_role: str | None = None) -> None:
        self._uow_factory = unit_of_work_factory
        self._superuser_role = superuser_role

    async def resolve(
        self, subject: str | None, realm_roles: list[str] | None = None
    ) -> RequestingIdentity:
        """Resolve subject (username) to an identity. No subject means anonymous."""
        if not subject:
            return ANONYMOUS

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_username(subject)

        has_role = bool(self._superuser_role) and self._superuser_role in (realm_roles or [])
        if not profile:
            logger.debug("No profile for subject %s", subject)
            return AuthenticatedIdentity(profile_id=subject, is_superuser=has_role)

        return AuthenticatedIdentity(
            profile_id=profile.username,
            member_group_ids=frozenset(profile.groups),
            is_superuser=profile.is_superuser() or has_role,
        )
