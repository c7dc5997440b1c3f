"""Requesting identity - who is asking for access."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Anonymous:
    """Caller without a session."""

    @property
    def is_superuser(self) -> bool:
        return False

    @property
    def member_group_ids(self) -> frozenset[str]:
        return frozenset()


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller resolved to a profile, with its group memberships."""

    profile_id: str
    member_group_ids: frozenset[str] = field(default_factory=frozenset)
    is_superuser: bool = False


RequestingIdentity = Anonymous | AuthenticatedIdentity

ANONYMOUS = Anonymous()
