"""Legacy modifier notations.

Older stores kept the three modifiers (owner, group, all) either as a
letter string such as ``"ARN"`` or as Unix-style digits such as ``"620"``.
These helpers translate between those notations and ``PermissionModifier``.
Malformed input raises ``ValueError``.
"""

from resaccess.domain.value_objects.permission_modifier import PermissionModifier

ModifierTriple = tuple[PermissionModifier, PermissionModifier, PermissionModifier]

_LETTERS: dict[str, PermissionModifier] = {
    "A": PermissionModifier.READ_WRITE,
    "W": PermissionModifier.READ_WRITE,
    "R": PermissionModifier.READ,
    "N": PermissionModifier.NONE,
}

_LETTER_OUT: dict[PermissionModifier, str] = {
    PermissionModifier.READ_WRITE: "A",
    PermissionModifier.READ: "R",
    PermissionModifier.NONE: "N",
}

# 2 and 6 were the readable values of the numeric scheme; 4 is the Unix read bit.
_DIGITS: dict[str, PermissionModifier] = {
    "0": PermissionModifier.NONE,
    "2": PermissionModifier.READ,
    "4": PermissionModifier.READ,
    "6": PermissionModifier.READ_WRITE,
}

_DIGIT_OUT: dict[PermissionModifier, str] = {
    PermissionModifier.READ_WRITE: "6",
    PermissionModifier.READ: "2",
    PermissionModifier.NONE: "0",
}


def _parse(text: str, table: dict[str, PermissionModifier], notation: str) -> ModifierTriple:
    symbols = (text or "").strip().upper()
    if len(symbols) > 3:
        raise ValueError(f"Too many {notation} modifiers: {text!r}")
    modifiers: list[PermissionModifier] = []
    for symbol in symbols:
        try:
            modifiers.append(table[symbol])
        except KeyError:
            raise ValueError(f"Unknown {notation} modifier {symbol!r} in {text!r}") from None
    modifiers.extend([PermissionModifier.NONE] * (3 - len(modifiers)))
    return modifiers[0], modifiers[1], modifiers[2]


def parse_letter_modifiers(text: str) -> ModifierTriple:
    """Parse ``"ARN"`` style modifiers. Missing tiers default to NONE."""
    return _parse(text, _LETTERS, "letter")


def format_letter_modifiers(
    owner: PermissionModifier, group: PermissionModifier, everybody: PermissionModifier
) -> str:
    """Format modifiers as a three letter string."""
    return "".join(_LETTER_OUT[m] for m in (owner, group, everybody))


def parse_numeric_modifiers(text: str) -> ModifierTriple:
    """Parse ``"620"`` style modifiers. Missing tiers default to NONE."""
    return _parse(text, _DIGITS, "numeric")


def format_numeric_modifiers(
    owner: PermissionModifier, group: PermissionModifier, everybody: PermissionModifier
) -> str:
    """Format modifiers as three digits."""
    return "".join(_DIGIT_OUT[m] for m in (owner, group, everybody))
