"""Profile entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Profile:
    """Profile - a user that can own resources and belong to groups."""

    username: str
    email: str | None = None
    full_name: str | None = None
    superuser: bool = False
    groups: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    last_access: datetime | None = None

    def is_superuser(self) -> bool:
        """Check if the profile bypasses access checks."""
        return self.superuser is True
