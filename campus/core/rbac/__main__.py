"""CLI for inspecting the role table.

Usage: python -m campus.core.rbac [role-table.yaml] [role]
"""

import sys

from campus.common.logger import setup_logger

from .exceptions import RBACError
from .loader import load_role_table
from .registry import PermissionRegistry
from .roles import DEFAULT_ROLES, ROLE_PERMISSIONS, Role


def main(argv=None) -> int:
    """Print the role matrix and any orphaned permissions."""
    args = sys.argv[1:] if argv is None else argv
    setup_logger("cli", level="WARNING")

    table_path = None
    role_arg = None
    for arg in args:
        if arg.endswith((".yaml", ".yml")):
            table_path = arg
        else:
            role_arg = arg

    try:
        if table_path:
            registry = PermissionRegistry(load_role_table(table_path), source=table_path)
        else:
            registry = PermissionRegistry(ROLE_PERMISSIONS)
        roles = [Role.parse(role_arg)] if role_arg else list(Role)
    except (FileNotFoundError, RBACError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for role in roles:
        perms = sorted(p.value for p in registry.permissions_for(role))
        print(f"{role.value} ({DEFAULT_ROLES[role]['name']}): {len(perms)} permissions")
        for perm in perms:
            print(f"  {perm}")

    if role_arg is None:
        orphaned = sorted(p.value for p in registry.orphaned_permissions())
        print(f"Orphaned permissions (super-admin only): {len(orphaned)}")
        for perm in orphaned:
            print(f"  {perm}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
