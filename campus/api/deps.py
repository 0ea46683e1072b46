from typing import Callable, Union

from fastapi import Depends, HTTPException, Request, status

from campus.core.rbac import Permission, is_authorized_for


def get_current_role(request: Request) -> str:
    """Role of the acting user, set on request.state by authentication middleware."""
    role = getattr(request.state, "role", None)
    if not role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return role


def require_permission(
    *permissions: Union[str, Permission], require_all: bool = False
) -> Callable:
    """
    Dependency factory for endpoints requiring specific permissions.

    Args:
        permissions: One or more permission strings or Permission members
        require_all: If True, the role must hold ALL permissions. Default: any one.

    Usage:
        @router.get("/campuses")
        async def list_campuses(role: str = Depends(require_permission("campus:view"))):
            ...

    The 403 response never names the missing permission.

    Raises:
        ValueError: If no permissions are given
    """
    if not permissions:
        raise ValueError("require_permission needs at least one permission")
    perm_strs = [str(p) for p in permissions]

    def dependency(role: str = Depends(get_current_role)) -> str:
        if not is_authorized_for(role, perm_strs, require_all=require_all):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return role

    return dependency
