"""Domain value objects."""

from resaccess.domain.value_objects.access_operation import AccessOperation
from resaccess.domain.value_objects.legacy_modifiers import (
    format_letter_modifiers,
    format_numeric_modifiers,
    parse_letter_modifiers,
    parse_numeric_modifiers,
)
from resaccess.domain.value_objects.permission_modifier import (
    READABLE,
    WRITABLE,
    PermissionModifier,
)

__all__ = [
    "READABLE",
    "WRITABLE",
    "AccessOperation",
    "PermissionModifier",
    "format_letter_modifiers",
    "format_numeric_modifiers",
    "parse_letter_modifiers",
    "parse_numeric_modifiers",
]
