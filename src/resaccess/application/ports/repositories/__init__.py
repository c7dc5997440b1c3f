"""Repository ports."""

from resaccess.application.ports.repositories.profile_repository import ProfileRepository
from resaccess.application.ports.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "ProfileRepository",
    "ResourceRepository",
]
