"""Access filter - query conditions selecting the resources an identity can read.

The expression tree is plain data. Query layers translate it into their own
syntax (see the Postgres resource repository) or evaluate it in memory with
``matches``.
"""

from dataclasses import dataclass
from enum import StrEnum

from resaccess.domain.entities import AccessPolicy, AuthenticatedIdentity, RequestingIdentity
from resaccess.domain.value_objects import READABLE


class PolicyField(StrEnum):
    """Access policy fields a filter can compare."""

    OWNER_ID = "owner_id"
    GROUP_ID = "group_id"
    OWNER_MODIFIER = "owner_modifier"
    GROUP_MODIFIER = "group_modifier"
    ALL_MODIFIER = "all_modifier"


class ComparisonOperator(StrEnum):
    EQ = "eq"
    IN = "in"


class JoinOperator(StrEnum):
    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class Comparison:
    """Single field comparison. ``IN`` takes a frozenset value."""

    field: PolicyField
    operator: ComparisonOperator
    value: object


@dataclass(frozen=True)
class Join:
    """AND / OR over two or more clauses."""

    operator: JoinOperator
    clauses: tuple["FilterExpression", ...]


FilterExpression = Comparison | Join


def eq(field: PolicyField, value: object) -> Comparison:
    return Comparison(field, ComparisonOperator.EQ, value)


def in_(field: PolicyField, values) -> Comparison:
    return Comparison(field, ComparisonOperator.IN, frozenset(values))


def _join(operator: JoinOperator, clauses: tuple[FilterExpression, ...]) -> FilterExpression:
    if not clauses:
        raise ValueError(f"{operator.value.upper()} needs at least one clause")
    if len(clauses) == 1:
        return clauses[0]
    return Join(operator, tuple(clauses))


def and_(*clauses: FilterExpression) -> FilterExpression:
    """Join clauses with AND. A single clause is returned as is."""
    return _join(JoinOperator.AND, clauses)


def or_(*clauses: FilterExpression) -> FilterExpression:
    """Join clauses with OR. A single clause is returned as is."""
    return _join(JoinOperator.OR, clauses)


def build_access_filter(identity: RequestingIdentity) -> FilterExpression:
    """Build the condition matching every resource the identity can read.

    Superusers are not special-cased here: callers that want the bypass skip
    applying the filter.
    """
    conditions: list[FilterExpression] = []

    if isinstance(identity, AuthenticatedIdentity):
        conditions.append(
            and_(
                eq(PolicyField.OWNER_ID, identity.profile_id),
                in_(PolicyField.OWNER_MODIFIER, READABLE),
            )
        )
        if identity.member_group_ids:
            conditions.append(
                and_(
                    in_(PolicyField.GROUP_ID, identity.member_group_ids),
                    in_(PolicyField.GROUP_MODIFIER, READABLE),
                )
            )

    conditions.append(in_(PolicyField.ALL_MODIFIER, READABLE))

    return or_(*conditions)


def merge_filters(
    conditions: FilterExpression | None, access_filter: FilterExpression
) -> FilterExpression:
    """AND caller conditions with an access filter."""
    if conditions is None:
        return access_filter
    return and_(conditions, access_filter)


def matches(expression: FilterExpression, policy: AccessPolicy) -> bool:
    """Evaluate an expression against a loaded policy."""
    if isinstance(expression, Join):
        results = (matches(clause, policy) for clause in expression.clauses)
        if expression.operator is JoinOperator.AND:
            return all(results)
        return any(results)

    actual = getattr(policy, expression.field.value)
    if actual is None or actual == "":
        return False
    if expression.operator is ComparisonOperator.EQ:
        return actual == expression.value
    return actual in expression.value
