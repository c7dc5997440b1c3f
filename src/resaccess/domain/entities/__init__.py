"""Domain entities."""

from resaccess.domain.entities.access_policy import AccessPolicy
from resaccess.domain.entities.identity import (
    ANONYMOUS,
    Anonymous,
    AuthenticatedIdentity,
    RequestingIdentity,
)
from resaccess.domain.entities.profile import Profile
from resaccess.domain.entities.resource import Resource

__all__ = [
    "ANONYMOUS",
    "AccessPolicy",
    "Anonymous",
    "AuthenticatedIdentity",
    "Profile",
    "RequestingIdentity",
    "Resource",
]
