"""Errors raised by the campus RBAC module."""


class RBACError(Exception):
    """Base class for authorization errors."""


class UnknownRole(RBACError, ValueError):
    """A role identifier outside the fixed role enumeration."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class UnknownPermission(RBACError, ValueError):
    """A permission identifier outside the fixed permission enumeration."""

    def __init__(self, permission):
        self.permission = permission
        super().__init__(f"Unknown permission: {permission!r}")


class RoleTableError(RBACError):
    """The role assignment table failed its consistency check."""
