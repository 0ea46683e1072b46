"""Tests for role definitions and the role assignment table."""

import pytest

from campus.core.rbac.exceptions import UnknownRole
from campus.core.rbac.permissions import Permission
from campus.core.rbac.roles import (
    ALL_PERMISSIONS,
    DEFAULT_ROLES,
    PARENT_PERMISSIONS,
    ROLE_PERMISSIONS,
    Role,
    get_role_info,
)


class TestRoleEnumeration:
    """Test role identifiers and parsing."""

    def test_role_identifiers(self):
        assert [r.value for r in Role] == [
            "super-admin",
            "admin",
            "program_coordinator",
            "teacher",
            "student",
            "parent",
        ]

    def test_parse_known_role(self):
        assert Role.parse("teacher") is Role.TEACHER
        assert Role.parse(Role.ADMIN) is Role.ADMIN

    def test_parse_tolerates_separator(self):
        assert Role.parse("program-coordinator") is Role.PROGRAM_COORDINATOR
        assert Role.parse("super_admin") is Role.SUPER_ADMIN

    @pytest.mark.parametrize("value", ["guest", "", "Admin", None, 42])
    def test_parse_unknown_role_raises(self, value):
        with pytest.raises(UnknownRole) as exc_info:
            Role.parse(value)
        assert exc_info.value.role == value


class TestRoleTable:
    """Test the role assignment table."""

    def test_every_role_has_an_entry(self):
        assert set(ROLE_PERMISSIONS) == set(Role)
        assert set(DEFAULT_ROLES) == set(Role)

    def test_super_admin_is_derived(self):
        assert ROLE_PERMISSIONS[Role.SUPER_ADMIN] is ALL_PERMISSIONS

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[Role.PARENT] = (Permission.USER_CREATE,)

    def test_parent_only_reads_users(self):
        assert PARENT_PERMISSIONS == (Permission.USER_READ,)

    def test_get_role_info(self):
        info = get_role_info("program-coordinator")
        assert info["name"] == "Program Coordinator"
        assert info["is_system"] is True

        # Copies, not the shared definition
        info["name"] = "changed"
        assert DEFAULT_ROLES[Role.PROGRAM_COORDINATOR]["name"] == "Program Coordinator"

    def test_get_role_info_unknown(self):
        with pytest.raises(UnknownRole):
            get_role_info("guest")
