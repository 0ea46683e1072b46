"""Default role definitions for campus administration.

Defines the 6 fixed roles with their permission sets:
1. Super Admin - Every permission, derived from the permission enumeration
2. Admin - User, campus, class group and gradebook administration
3. Program Coordinator - Class groups and gradebooks for a program
4. Teacher - Grading and gradebook viewing
5. Student - Own profile and class groups
6. Parent - Profile access only
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Union

from .exceptions import UnknownRole
from .permissions import Permission


class Role(str, Enum):
    """Roles assignable to a user."""

    SUPER_ADMIN = "super-admin"
    ADMIN = "admin"
    PROGRAM_COORDINATOR = "program_coordinator"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        # "program-coordinator" and "program_coordinator" name the same role
        if isinstance(value, str):
            normalized = value.replace("-", "_")
            for member in cls:
                if member.value.replace("-", "_") == normalized:
                    return member
        return None

    @classmethod
    def parse(cls, role_str: str) -> "Role":
        """Parse a role identifier coming from outside the process.

        Raises:
            UnknownRole: If the identifier is not a known role
        """
        if isinstance(role_str, cls):
            return role_str
        try:
            return cls(role_str)
        except (ValueError, TypeError):
            raise UnknownRole(role_str) from None


class _AllPermissions:
    """Marker granting every permission of the registry's universe."""

    def __repr__(self) -> str:
        return "ALL_PERMISSIONS"


ALL_PERMISSIONS = _AllPermissions()

RoleGrant = Union[Sequence[Permission], _AllPermissions]


# Super admin: resolved against the permission enumeration when the
# registry is built, so new permissions are granted automatically
SUPER_ADMIN_PERMISSIONS = ALL_PERMISSIONS

ADMIN_PERMISSIONS = (
    Permission.USER_CREATE,
    Permission.USER_READ,
    Permission.USER_UPDATE,
    Permission.USER_DELETE,
    Permission.ROLE_READ,
    Permission.SETTINGS_MANAGE,
    Permission.CLASS_GROUP_VIEW,
    Permission.CLASS_GROUP_MANAGE,
    Permission.GRADEBOOK_VIEW,
    Permission.GRADEBOOK_OVERVIEW,
    Permission.GRADEBOOK_MANAGE,
    Permission.GRADE_ACTIVITY,
    Permission.GRADE_MODIFY,
    Permission.CAMPUS_VIEW,
    Permission.CAMPUS_MANAGE,
    Permission.CAMPUS_DELETE,
)

PROGRAM_COORDINATOR_PERMISSIONS = (
    Permission.USER_READ,
    Permission.USER_UPDATE,
    Permission.CLASS_GROUP_VIEW,
    Permission.CLASS_GROUP_MANAGE,
    Permission.GRADEBOOK_VIEW,
    Permission.GRADEBOOK_OVERVIEW,
    Permission.GRADEBOOK_MANAGE,
    Permission.GRADE_ACTIVITY,
)

TEACHER_PERMISSIONS = (
    Permission.USER_READ,
    Permission.CLASS_GROUP_VIEW,
    Permission.GRADE_ACTIVITY,
    Permission.GRADEBOOK_VIEW,
    Permission.GRADEBOOK_OVERVIEW,
)

STUDENT_PERMISSIONS = (
    Permission.USER_READ,
    Permission.CLASS_GROUP_VIEW,
)

PARENT_PERMISSIONS = (
    Permission.USER_READ,
)


# Role assignment table, one entry per role
ROLE_PERMISSIONS: Mapping[Role, RoleGrant] = MappingProxyType({
    Role.SUPER_ADMIN: SUPER_ADMIN_PERMISSIONS,
    Role.ADMIN: ADMIN_PERMISSIONS,
    Role.PROGRAM_COORDINATOR: PROGRAM_COORDINATOR_PERMISSIONS,
    Role.TEACHER: TEACHER_PERMISSIONS,
    Role.STUDENT: STUDENT_PERMISSIONS,
    Role.PARENT: PARENT_PERMISSIONS,
})


DEFAULT_ROLES: Dict[Role, dict] = {
    Role.SUPER_ADMIN: {
        "name": "Super Admin",
        "description": "Full system access with all permissions",
        "is_system": True,
    },
    Role.ADMIN: {
        "name": "Admin",
        "description": "Manages users, campuses, class groups and gradebooks",
        "is_system": True,
    },
    Role.PROGRAM_COORDINATOR: {
        "name": "Program Coordinator",
        "description": "Coordinates class groups and gradebooks within a program",
        "is_system": True,
    },
    Role.TEACHER: {
        "name": "Teacher",
        "description": "Grades activities and views gradebooks",
        "is_system": True,
    },
    Role.STUDENT: {
        "name": "Student",
        "description": "Views own profile and class groups",
        "is_system": True,
    },
    Role.PARENT: {
        "name": "Parent",
        "description": "Views profile information",
        "is_system": True,
    },
}


def get_role_info(role: Union[str, Role]) -> dict:
    """Get display metadata for a role."""
    return DEFAULT_ROLES[Role.parse(role)].copy()
