"""ResAccess - owner/group/all access control for stored resources."""

__version__ = "0.1.0"
