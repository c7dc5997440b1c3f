"""Resource entity - a record protected by an access policy."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from resaccess.domain.entities.access_policy import AccessPolicy


@dataclass
class Resource:
    """Resource - named content owned by a profile and optionally a group."""

    id: UUID
    name: str
    content: str
    policy: AccessPolicy
    created_at: datetime
    updated_at: datetime
