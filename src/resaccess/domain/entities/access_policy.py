"""Access policy - owner, group and the three tier modifiers of a resource."""

from dataclasses import dataclass

from resaccess.domain.value_objects import PermissionModifier


@dataclass(frozen=True)
class AccessPolicy:
    """Access policy embedded in every access-controlled resource.

    Defaults follow the conventional owner=read/write, group=read, others=none.
    Empty owner or group ids never match any identity.
    """

    owner_id: str | None = None
    group_id: str | None = None
    owner_modifier: PermissionModifier = PermissionModifier.READ_WRITE
    group_modifier: PermissionModifier = PermissionModifier.READ
    all_modifier: PermissionModifier = PermissionModifier.NONE
