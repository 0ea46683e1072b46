"""Role table loading from YAML.

Lets a deployment replace the built-in role table at startup. The file
maps every role to a list of permissions, or to "*" for every permission:

    roles:
      super-admin: "*"
      admin: [user:create, user:read]
      parent: []
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from .exceptions import RoleTableError, UnknownPermission, UnknownRole
from .permissions import Permission
from .roles import ALL_PERMISSIONS, Role, RoleGrant

WILDCARD = "*"


def parse_role_table(config_dict: Dict[str, Any]) -> Dict[Role, RoleGrant]:
    """Parse a role table dictionary.

    Args:
        config_dict: Dictionary with a "roles" mapping

    Returns:
        Role table suitable for PermissionRegistry

    Raises:
        RoleTableError: If the structure, a role or a permission is invalid
    """
    roles = config_dict.get("roles")
    if not isinstance(roles, dict):
        raise RoleTableError("Role table must contain a 'roles' mapping")

    table: Dict[Role, RoleGrant] = {}
    for role_key, grant in roles.items():
        try:
            role = Role.parse(role_key)
        except UnknownRole as exc:
            raise RoleTableError(str(exc)) from exc
        if role in table:
            raise RoleTableError(f"Role table names {role.value!r} more than once")

        if grant == WILDCARD:
            table[role] = ALL_PERMISSIONS
            continue
        if grant is None:
            grant = []
        if not isinstance(grant, list):
            raise RoleTableError(
                f"Permissions for role {role.value!r} must be a list or '{WILDCARD}'"
            )
        try:
            table[role] = tuple(Permission.from_string(p) for p in grant)
        except UnknownPermission as exc:
            raise RoleTableError(
                f"Role {role.value!r} is granted an unknown permission: {exc.permission!r}"
            ) from exc

    return table


def load_role_table(config_path: str) -> Dict[Role, RoleGrant]:
    """Load a role table from a YAML file.

    Args:
        config_path: Path to the role table file

    Returns:
        Role table suitable for PermissionRegistry

    Raises:
        FileNotFoundError: If the file doesn't exist
        RoleTableError: If the file is not valid YAML or not a valid table
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Role table not found: {config_path}")

    try:
        with config_file.open("r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise RoleTableError(f"Invalid YAML in role table {config_path}: {exc}") from exc

    if not isinstance(config, dict):
        raise RoleTableError(
            f"Role table root must be a mapping, got {type(config).__name__}"
        )

    return parse_role_table(_expand_env_vars(config))


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in string values."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj
