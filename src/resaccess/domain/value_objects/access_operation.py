"""Operations that can be requested on a resource."""

from enum import StrEnum


class AccessOperation(StrEnum):
    """Operations checked against a resource's access policy."""

    READ = "read"
    WRITE = "write"
