"""Domain services - pure access decisions and filters."""

from resaccess.domain.services.access_control import can_access
from resaccess.domain.services.access_filter import (
    Comparison,
    ComparisonOperator,
    FilterExpression,
    Join,
    JoinOperator,
    PolicyField,
    and_,
    build_access_filter,
    eq,
    in_,
    matches,
    merge_filters,
    or_,
)

__all__ = [
    "Comparison",
    "ComparisonOperator",
    "FilterExpression",
    "Join",
    "JoinOperator",
    "PolicyField",
    "and_",
    "build_access_filter",
    "can_access",
    "eq",
    "in_",
    "matches",
    "merge_filters",
    "or_",
]
