"""Permission model for campus administration RBAC.

Every permission is a fixed "resource:action" identifier. The identifiers
are persisted against user records by other services, so renaming one is
a breaking change.

Examples:
  - user:create
  - gradebook:overview
  - class:assign-teachers
"""

from enum import Enum
from typing import FrozenSet, List

from .exceptions import UnknownPermission


class Permission(str, Enum):
    """All permissions known to the system."""

    # User permissions
    USER_CREATE = "user:create"
    USER_READ = "user:read"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"

    # Role permissions
    ROLE_CREATE = "role:create"
    ROLE_READ = "role:read"
    ROLE_UPDATE = "role:update"
    ROLE_DELETE = "role:delete"

    # Permission management
    PERMISSION_MANAGE = "permission:manage"

    # System settings
    SETTINGS_MANAGE = "settings:manage"

    # Campus management
    CAMPUS_VIEW = "campus:view"
    CAMPUS_MANAGE = "campus:manage"
    CAMPUS_DELETE = "campus:delete"

    # Academic calendar
    ACADEMIC_CALENDAR_VIEW = "academic-calendar:view"
    ACADEMIC_CALENDAR_MANAGE = "academic-calendar:manage"
    ACADEMIC_YEAR_MANAGE = "academic-year:manage"
    EVENT_MANAGE = "event:manage"

    # Program management
    PROGRAM_VIEW = "program:view"
    PROGRAM_MANAGE = "program:manage"
    PROGRAM_DELETE = "program:delete"

    # Class group management
    CLASS_GROUP_VIEW = "class-group:view"
    CLASS_GROUP_MANAGE = "class-group:manage"
    CLASS_GROUP_DELETE = "class-group:delete"

    # Class management
    CLASS_VIEW = "class:view"
    CLASS_MANAGE = "class:manage"
    CLASS_DELETE = "class:delete"
    CLASS_ASSIGN_TEACHERS = "class:assign-teachers"
    CLASS_ASSIGN_STUDENTS = "class:assign-students"

    # Gradebook
    GRADEBOOK_VIEW = "gradebook:view"
    GRADEBOOK_OVERVIEW = "gradebook:overview"
    GRADEBOOK_MANAGE = "gradebook:manage"
    GRADE_ACTIVITY = "grade:activity"
    GRADE_MODIFY = "grade:modify"

    # Subject management
    SUBJECT_VIEW = "subject:view"
    SUBJECT_MANAGE = "subject:manage"
    SUBJECT_DELETE = "subject:delete"
    SUBJECT_ASSIGN_TEACHERS = "subject:assign-teachers"

    def __str__(self) -> str:
        return self.value

    @property
    def resource(self) -> str:
        return self.value.split(":", 1)[0]

    @property
    def action(self) -> str:
        return self.value.split(":", 1)[1]

    @classmethod
    def from_string(cls, perm_str: str) -> "Permission":
        """Parse a permission string like 'gradebook:view'.

        Raises:
            UnknownPermission: If the string is not a known permission
        """
        if isinstance(perm_str, cls):
            return perm_str
        try:
            return cls(perm_str)
        except ValueError:
            raise UnknownPermission(perm_str) from None


def is_valid_permission(perm_str: str) -> bool:
    """Check if a permission string is valid."""
    try:
        Permission.from_string(perm_str)
    except UnknownPermission:
        return False
    return True


def get_permissions_for_resource(resource: str) -> List[Permission]:
    """Get all permissions defined for a resource, in declaration order."""
    return [perm for perm in Permission if perm.resource == resource]


def get_all_permissions() -> FrozenSet[Permission]:
    """Get every defined permission."""
    return frozenset(Permission)
