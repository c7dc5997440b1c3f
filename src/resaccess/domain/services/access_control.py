"""Access decision for a single loaded resource."""

from resaccess.domain.entities import AccessPolicy, AuthenticatedIdentity, RequestingIdentity
from resaccess.domain.value_objects import AccessOperation


def can_access(
    policy: AccessPolicy, identity: RequestingIdentity, operation: AccessOperation
) -> bool:
    """Check if identity may perform operation on a resource with this policy.

    Evaluated in order, the first granting rule wins:
    superuser, everybody modifier, owner modifier, group modifier.
    Anonymous identities only get what the everybody modifier grants.
    """
    if identity.is_superuser:
        return True

    if policy.all_modifier.satisfies(operation):
        return True

    if not isinstance(identity, AuthenticatedIdentity):
        return False

    if (
        policy.owner_id
        and identity.profile_id == policy.owner_id
        and policy.owner_modifier.satisfies(operation)
    ):
        return True

    if (
        policy.group_id
        and policy.group_id in identity.member_group_ids
        and policy.group_modifier.satisfies(operation)
    ):
        return True

    return False
