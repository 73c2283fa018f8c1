"""Permission checking utilities for Inkwell.

Provides the permission evaluator and FastAPI guards built on it.
"""

import logging
from functools import wraps
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from fastapi import HTTPException, Request, status

from .models import ResourceGrants, User
from .permissions import Permission, Resource

logger = logging.getLogger(__name__)


def _value(member) -> str:
    """Plain value of an enum member, or the argument itself if already a string."""
    return getattr(member, "value", member)


def has_permission(
    resource_permissions: ResourceGrants,
    resource: Resource,
    permission: Permission,
) -> bool:
    """
    Check if a resource mapping grants a permission on a resource.

    Args:
        resource_permissions: The resources mapping from a Role
        resource: The resource to check
        permission: The permission to verify

    Returns:
        True if the resource is present and its permissions include ``permission``
    """
    permissions = resource_permissions.get(resource)
    return bool(permissions) and permission in permissions


def user_can(user: User, resource: Resource, permission: Permission) -> bool:
    """
    Check if a user may perform a permission on a resource.

    Any role named admin grants everything, whatever its resources mapping
    holds. Otherwise grants are additive across all of the user's roles.
    ``user.is_active`` and resource ownership are left to the caller.

    Args:
        user: User with role instances
        resource: The resource to check
        permission: The permission to verify

    Returns:
        True if access is granted
    """
    if any(role.is_admin for role in user.roles):
        return True

    if any(has_permission(role.resources, resource, permission) for role in user.roles):
        return True

    logger.debug(
        "Denied %s:%s for user %s (roles: %s)",
        _value(resource), _value(permission), user.id,
        ", ".join(role.id for role in user.roles) or "none",
    )
    return False


class UserPermissionChecker:
    """Checks a single user's permissions across all of their roles."""

    def __init__(self, user: User):
        self.user = user

    @property
    def is_admin(self) -> bool:
        return any(role.is_admin for role in self.user.roles)

    def can(self, resource: Resource, permission: Permission) -> bool:
        """Check if user can perform permission on resource."""
        return user_can(self.user, resource, permission)

    def can_any(self, checks: Iterable[Tuple[Resource, Permission]]) -> bool:
        """Check if user has any of the given (resource, permission) pairs."""
        return any(self.can(r, p) for r, p in checks)

    def can_all(self, checks: Iterable[Tuple[Resource, Permission]]) -> bool:
        """Check if user has all of the given (resource, permission) pairs."""
        return all(self.can(r, p) for r, p in checks)

    def accessible_resources(self, permission: Permission) -> List[Resource]:
        """Get list of resources the user can perform the permission on."""
        accessible = []
        for resource in Resource:
            if self.can(resource, permission):
                accessible.append(resource)
        return accessible

    def effective_permissions(self) -> Dict[Resource, FrozenSet[Permission]]:
        """Union of grants across all roles. Admins get everything."""
        if self.is_admin:
            return {resource: frozenset(Permission) for resource in Resource}

        merged: Dict[Resource, set] = {}
        for role in self.user.roles:
            for resource, permissions in role.resources.items():
                if permissions:
                    merged.setdefault(resource, set()).update(permissions)
        return {resource: frozenset(perms) for resource, perms in merged.items()}


def _check_access(
    current_user: Optional[User],
    resource: Resource,
    permission: Permission,
) -> None:
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )

    if not user_can(current_user, resource, permission):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Insufficient permissions. Required: {_value(resource)}:{_value(permission)}"
        )


def require_permission(resource: Resource, permission: Permission):
    """
    Decorator factory for FastAPI endpoints requiring a permission.

    Usage:
        @router.post("/articles/drafts")
        @require_permission(Resource.ARTICLE_DRAFT, Permission.CREATE)
        async def create_draft(current_user: User = Depends(get_current_user)):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            # Find the current_user in kwargs (injected by FastAPI Depends)
            current_user = kwargs.get("current_user")
            if current_user is None:
                for arg in args:
                    if isinstance(arg, User):
                        current_user = arg
                        break

            _check_access(current_user, resource, permission)
            return await func(*args, **kwargs)

        return wrapper
    return decorator


class PermissionDependency:
    """
    FastAPI dependency for permission checking.

    Expects the host's authentication middleware to have set
    ``request.state.user`` to a User.

    Usage:
        @router.get(
            "/settings",
            dependencies=[Depends(PermissionDependency(Resource.SETTINGS_MANAGE, Permission.READ))],
        )
        async def read_settings():
            ...
    """

    def __init__(self, resource: Resource, permission: Permission):
        self.resource = resource
        self.permission = permission

    async def __call__(self, request: Request) -> bool:
        current_user = getattr(request.state, "user", None)
        _check_access(current_user, self.resource, self.permission)
        return True
