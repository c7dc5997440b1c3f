"""Permission modifier - access level granted to one tier (owner, group, all)."""

from enum import StrEnum

from resaccess.domain.value_objects.access_operation import AccessOperation


class PermissionModifier(StrEnum):
    """Access level of a tier. Write implies read."""

    NONE = "none"
    READ = "read"
    READ_WRITE = "read_write"

    @classmethod
    def allowing(cls, operation: AccessOperation) -> frozenset["PermissionModifier"]:
        """Modifiers that satisfy the operation."""
        return _ALLOWED[operation]

    def satisfies(self, operation: AccessOperation) -> bool:
        """Check if this modifier grants the operation."""
        return self in _ALLOWED[operation]


READABLE = frozenset({PermissionModifier.READ, PermissionModifier.READ_WRITE})
WRITABLE = frozenset({PermissionModifier.READ_WRITE})

_ALLOWED: dict[AccessOperation, frozenset[PermissionModifier]] = {
    AccessOperation.READ: READABLE,
    AccessOperation.WRITE: WRITABLE,
}
