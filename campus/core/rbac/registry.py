"""Permission registry for campus administration.

Answers "does role R hold permission P?" against the role assignment
table. The registry is built once at startup and never mutated, so
lookups need no locking.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Union

from campus.common.logger import get_logger
from campus.core.config import get_settings

from .exceptions import RBACError, RoleTableError, UnknownPermission, UnknownRole
from .loader import load_role_table
from .permissions import Permission
from .roles import ALL_PERMISSIONS, ROLE_PERMISSIONS, Role, RoleGrant

logger = get_logger("rbac")


class PermissionRegistry:
    """Immutable role to permission-set lookup."""

    def __init__(
        self,
        assignments: Mapping[Union[str, Role], RoleGrant],
        permissions: Iterable = Permission,
        source: str = "built-in",
    ):
        """
        Build the registry and check the table for consistency.

        Args:
            assignments: Grant for every role; super admin must use ALL_PERMISSIONS
            permissions: Universe of valid permissions
            source: Where the table came from, for logging

        Raises:
            RoleTableError: If a role is missing or unknown, super admin is not
                granted ALL_PERMISSIONS, or a grant names an unknown permission
        """
        universe = frozenset(permissions)
        if not universe:
            raise RoleTableError("Permission universe is empty")
        self._by_value = {_identifier(p): p for p in universe}
        self._permissions = universe
        self.source = source

        grants = {}
        for key, grant in assignments.items():
            try:
                role = Role.parse(key)
            except UnknownRole as exc:
                raise RoleTableError(f"Role table names an unknown role: {key!r}") from exc
            if role in grants:
                raise RoleTableError(f"Role table names {role.value!r} more than once")
            grants[role] = grant

        missing = [role.value for role in Role if role not in grants]
        if missing:
            raise RoleTableError(f"Roles without an entry: {', '.join(missing)}")

        if grants[Role.SUPER_ADMIN] is not ALL_PERMISSIONS:
            raise RoleTableError("super-admin must be granted ALL_PERMISSIONS")

        table = {}
        for role in Role:
            grant = grants[role]
            if grant is ALL_PERMISSIONS:
                table[role] = universe
                continue
            try:
                table[role] = frozenset(self._resolve_permission(p) for p in grant)
            except UnknownPermission as exc:
                raise RoleTableError(
                    f"Role {role.value!r} is granted an unknown permission: {exc.permission!r}"
                ) from exc
        self._table = MappingProxyType(table)

    def _resolve_permission(self, permission):
        key = _identifier(permission)
        if isinstance(key, str):
            resolved = self._by_value.get(key)
            if resolved is not None:
                return resolved
        raise UnknownPermission(permission)

    def has_permission(self, role: Union[str, Role], permission: Union[str, Permission]) -> bool:
        """Check if a role holds a permission.

        Raises:
            UnknownRole: If the role is not a known role
            UnknownPermission: If the permission is not in the universe
        """
        role = Role.parse(role)
        return self._resolve_permission(permission) in self._table[role]

    def has_any_permission(self, role, permissions: Iterable) -> bool:
        """Check if a role holds any of the given permissions."""
        return any(self.has_permission(role, p) for p in permissions)

    def has_all_permissions(self, role, permissions: Iterable) -> bool:
        """Check if a role holds all of the given permissions."""
        return all(self.has_permission(role, p) for p in permissions)

    def permissions_for(self, role: Union[str, Role]) -> FrozenSet[Permission]:
        """Get the full permission set of a role (empty if it has none)."""
        return self._table[Role.parse(role)]

    def all_permissions(self) -> FrozenSet[Permission]:
        """Get every permission known to this registry."""
        return self._permissions

    def roles_with_permission(self, permission: Union[str, Permission]) -> List[Role]:
        """Get the roles holding a permission, in declaration order."""
        perm = self._resolve_permission(permission)
        return [role for role in Role if perm in self._table[role]]

    def orphaned_permissions(self) -> FrozenSet[Permission]:
        """Get permissions that no role other than super admin holds."""
        granted = set()
        for role, perms in self._table.items():
            if role is not Role.SUPER_ADMIN:
                granted.update(perms)
        return self._permissions - granted

    def is_authorized(self, role, permission, strict: bool = False) -> bool:
        """Fail-closed permission check.

        Unknown roles and permissions are denied and logged. With strict
        set, the error propagates instead.
        """
        try:
            return self.has_permission(role, permission)
        except RBACError as exc:
            if strict:
                raise
            logger.warning("Authorization denied: %s", exc)
            return False

    def is_authorized_for(
        self, role, permissions: Iterable, require_all: bool = False, strict: bool = False
    ) -> bool:
        """Fail-closed check against several permissions.

        The role must hold any one of them, or all of them with require_all.
        An empty permission list is denied.
        """
        permissions = list(permissions)
        if not permissions:
            logger.warning("Authorization denied: no permissions to check")
            return False
        try:
            if require_all:
                return self.has_all_permissions(role, permissions)
            return self.has_any_permission(role, permissions)
        except RBACError as exc:
            if strict:
                raise
            logger.warning("Authorization denied: %s", exc)
            return False


def _identifier(permission):
    return getattr(permission, "value", permission)


@lru_cache
def get_registry() -> PermissionRegistry:
    """Build the process-wide registry from settings (once)."""
    settings = get_settings()
    if settings.role_table_path:
        registry = PermissionRegistry(
            load_role_table(settings.role_table_path),
            source=settings.role_table_path,
        )
    else:
        registry = PermissionRegistry(ROLE_PERMISSIONS)

    logger.info(
        "Loaded role table from %s: %d roles, %d permissions",
        registry.source, len(Role), len(registry.all_permissions()),
    )
    return registry


def has_permission(role: Union[str, Role], permission: Union[str, Permission]) -> bool:
    """
    Check if a role holds a permission.

    Args:
        role: Role identifier or Role member
        permission: Permission string or Permission member

    Returns:
        True if the role's entry in the role table contains the permission

    Raises:
        UnknownRole: If the role is not a known role
        UnknownPermission: If the permission is not a known permission
    """
    return get_registry().has_permission(role, permission)


def permissions_for(role: Union[str, Role]) -> FrozenSet[Permission]:
    """Get the full permission set of a role."""
    return get_registry().permissions_for(role)


def all_permissions() -> FrozenSet[Permission]:
    """Get every permission known to the system."""
    return get_registry().all_permissions()


def is_authorized(role, permission, strict: Optional[bool] = None) -> bool:
    """Fail-closed permission check; strict defaults to the debug setting."""
    if strict is None:
        strict = get_settings().debug
    return get_registry().is_authorized(role, permission, strict=strict)


def is_authorized_for(
    role, permissions: Iterable, require_all: bool = False, strict: Optional[bool] = None
) -> bool:
    """Fail-closed any/all permission check; strict defaults to the debug setting."""
    if strict is None:
        strict = get_settings().debug
    return get_registry().is_authorized_for(
        role, permissions, require_all=require_all, strict=strict
    )
