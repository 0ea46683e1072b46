"""Read-only role matrix endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from campus.api.deps import require_permission
from campus.core.rbac import Permission, Role, UnknownRole, get_registry
from campus.core.rbac.permissions import get_permissions_for_resource
from campus.core.rbac.roles import get_role_info

router = APIRouter(prefix="/roles", tags=["roles"])


# Schemas
class RoleResponse(BaseModel):
    role: str
    name: str
    description: str
    is_system: bool
    permissions: List[str]

class PermissionInfo(BaseModel):
    permission: str
    resource: str
    action: str
    roles: List[str]


def _role_response(role: Role) -> RoleResponse:
    info = get_role_info(role)
    return RoleResponse(
        role=role.value,
        name=info["name"],
        description=info["description"],
        is_system=info["is_system"],
        permissions=sorted(p.value for p in get_registry().permissions_for(role)),
    )


# Endpoints
@router.get("", response_model=List[RoleResponse])
async def list_roles(
    _: str = Depends(require_permission(Permission.ROLE_READ)),
):
    """List every role with its permissions."""
    return [_role_response(role) for role in Role]


@router.get("/permissions", response_model=List[PermissionInfo])
async def list_all_permissions(
    _: str = Depends(require_permission(Permission.PERMISSION_MANAGE)),
    resource: Optional[str] = Query(None, description="Only permissions on this resource"),
):
    """List all available permissions and the roles holding them."""
    registry = get_registry()
    if resource is None:
        permissions = sorted(registry.all_permissions(), key=lambda p: p.value)
    else:
        permissions = get_permissions_for_resource(resource)
    return [
        PermissionInfo(
            permission=p.value,
            resource=p.resource,
            action=p.action,
            roles=[r.value for r in registry.roles_with_permission(p)],
        )
        for p in permissions
    ]


@router.get("/{role_key}", response_model=RoleResponse)
async def get_role(
    role_key: str,
    _: str = Depends(require_permission(Permission.ROLE_READ)),
):
    """Get a single role by identifier."""
    try:
        role = Role.parse(role_key)
    except UnknownRole:
        raise HTTPException(status_code=404, detail="Role not found")
    return _role_response(role)
