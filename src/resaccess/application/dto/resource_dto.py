"""Resource DTOs."""

from dataclasses import dataclass

from resaccess.domain.value_objects import PermissionModifier


@dataclass
class ResourceCreateInput:
    """Input for creating a resource. Unset modifiers take configured defaults."""

    name: str
    content: str = ""
    group_id: str | None = None
    owner_modifier: PermissionModifier | None = None
    group_modifier: PermissionModifier | None = None
    all_modifier: PermissionModifier | None = None


@dataclass
class ResourceUpdateInput:
    """Input for updating a resource. ``None`` leaves a field unchanged."""

    name: str | None = None
    content: str | None = None
    owner_id: str | None = None
    group_id: str | None = None
    owner_modifier: PermissionModifier | None = None
    group_modifier: PermissionModifier | None = None
    all_modifier: PermissionModifier | None = None
