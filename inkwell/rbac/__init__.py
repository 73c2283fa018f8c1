"""RBAC (Role-Based Access Control) module for Inkwell.

This module defines the permission model, role definitions, and access control utilities.
"""

from .permissions import Resource, Permission, LEGACY_RESOURCES, get_all_resources, get_all_permissions
from .roles import RoleName, DEFAULT_ROLE_PERMISSIONS, get_default_role_permissions, get_all_role_names
from .models import Role, User
from .display import (
    ROLE_DISPLAY_NAMES,
    ROLE_DESCRIPTIONS,
    RESOURCE_DISPLAY_NAMES,
    RESOURCE_GROUPS,
    ResourceGroup,
    get_resource_group,
    get_resources_in_group,
)
from .checker import (
    UserPermissionChecker,
    PermissionDependency,
    has_permission,
    require_permission,
    user_can,
)
from .exceptions import RBACConsistencyError

__all__ = [
    "Resource",
    "Permission",
    "LEGACY_RESOURCES",
    "RoleName",
    "Role",
    "User",
    "DEFAULT_ROLE_PERMISSIONS",
    "ROLE_DISPLAY_NAMES",
    "ROLE_DESCRIPTIONS",
    "RESOURCE_DISPLAY_NAMES",
    "RESOURCE_GROUPS",
    "ResourceGroup",
    "RBACConsistencyError",
    "UserPermissionChecker",
    "PermissionDependency",
    "get_all_resources",
    "get_all_permissions",
    "get_all_role_names",
    "get_default_role_permissions",
    "get_resource_group",
    "get_resources_in_group",
    "has_permission",
    "require_permission",
    "user_can",
]
