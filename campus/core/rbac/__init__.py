"""RBAC (Role-Based Access Control) module for campus administration.

This module defines the permission and role enumerations, the role
assignment table, and the registry that answers permission checks.
"""

from .exceptions import RBACError, RoleTableError, UnknownPermission, UnknownRole
from .permissions import Permission, get_all_permissions, is_valid_permission
from .roles import ALL_PERMISSIONS, DEFAULT_ROLES, ROLE_PERMISSIONS, Role
from .registry import (
    PermissionRegistry,
    all_permissions,
    get_registry,
    has_permission,
    is_authorized,
    is_authorized_for,
    permissions_for,
)

__all__ = [
    "ALL_PERMISSIONS",
    "DEFAULT_ROLES",
    "Permission",
    "PermissionRegistry",
    "RBACError",
    "ROLE_PERMISSIONS",
    "Role",
    "RoleTableError",
    "UnknownPermission",
    "UnknownRole",
    "all_permissions",
    "get_all_permissions",
    "get_registry",
    "has_permission",
    "is_authorized",
    "is_authorized_for",
    "is_valid_permission",
    "permissions_for",
]
