"""Role names and default role permissions for Inkwell RBAC.

Defines the 7 fixed role names and the permission set each one is seeded
with when a new role instance is created:
1. Admin - Full system access (granted by the evaluator, not by this table)
2. Editor - All content, no user or system management
3. Author - Own articles and media
4. Viewer - Read-only published content
5. Contributor - Drafts only, cannot publish
6. Publisher - Publishes and archives articles
7. Reviewer - Reviews and approves drafts

"Own content only" restrictions noted below are enforced by the host
application's queries, not by these tables.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Set

from .exceptions import RBACConsistencyError, require_exhaustive
from .permissions import CRUD, Permission, Resource


class RoleName(str, Enum):
    """The fixed set of role names. Instances may share a name."""

    ADMIN = "admin"
    EDITOR = "editor"
    AUTHOR = "author"
    VIEWER = "viewer"
    CONTRIBUTOR = "contributor"
    PUBLISHER = "publisher"
    REVIEWER = "reviewer"


ResourcePermissions = Dict[Resource, FrozenSet[Permission]]

C = Permission.CREATE
R = Permission.READ
U = Permission.UPDATE
D = Permission.DELETE


def _build_permissions(*grants: tuple) -> ResourcePermissions:
    """Build a resource mapping from (Resource, Permission, ...) tuples."""
    return {resource: frozenset(perms) for resource, *perms in grants}


# Admin access is granted by the evaluator; this is only what a new admin
# role instance starts with.
ADMIN_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, *CRUD),
    (Resource.ARTICLE_PUBLISHED, *CRUD),
    (Resource.ARTICLE_ARCHIVED, *CRUD),
    (Resource.USER_VIEW, R),
    (Resource.USER_MANAGE, *CRUD),
    (Resource.CATEGORY_MANAGE, *CRUD),
    (Resource.TAG_MANAGE, *CRUD),
    (Resource.MEDIA_UPLOAD, C),
    (Resource.MEDIA_MANAGE, R, U, D),
    (Resource.ANALYTICS_VIEW, R),
    (Resource.SETTINGS_MANAGE, R, U),
)

# Editor: manage all content, but no user/system management
EDITOR_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, *CRUD),
    (Resource.ARTICLE_PUBLISHED, *CRUD),
    (Resource.ARTICLE_ARCHIVED, *CRUD),
    (Resource.USER_VIEW, R),
    (Resource.CATEGORY_MANAGE, *CRUD),
    (Resource.TAG_MANAGE, *CRUD),
    (Resource.MEDIA_UPLOAD, C),
    (Resource.MEDIA_MANAGE, R, U, D),
    (Resource.ANALYTICS_VIEW, R),
)

# Author: own articles and media
AUTHOR_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, *CRUD),
    (Resource.ARTICLE_PUBLISHED, R, U),
    (Resource.CATEGORY_MANAGE, R),
    (Resource.TAG_MANAGE, R),
    (Resource.MEDIA_UPLOAD, C),
    (Resource.MEDIA_MANAGE, R, D),  # own media only
    (Resource.ANALYTICS_VIEW, R),   # own article analytics
)

# Viewer: read-only published content
VIEWER_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_PUBLISHED, R),
    (Resource.ANALYTICS_VIEW, R),
)

# Contributor: drafts only, cannot publish
CONTRIBUTOR_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, C, R),
    (Resource.CATEGORY_MANAGE, R),
    (Resource.TAG_MANAGE, R),
    (Resource.MEDIA_UPLOAD, C),
)

# Publisher: publish and archive articles
PUBLISHER_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, R),
    (Resource.ARTICLE_PUBLISHED, C, R, U),
    (Resource.ARTICLE_ARCHIVED, C, R, U),
    (Resource.CATEGORY_MANAGE, R),
    (Resource.TAG_MANAGE, R),
    (Resource.ANALYTICS_VIEW, R),
)

# Reviewer: review and approve drafts
REVIEWER_PERMISSIONS = _build_permissions(
    (Resource.ARTICLE_DRAFT, R, U),
    (Resource.ARTICLE_PUBLISHED, R),
    (Resource.CATEGORY_MANAGE, R),
    (Resource.TAG_MANAGE, R),
    (Resource.ANALYTICS_VIEW, R),
)


DEFAULT_ROLE_PERMISSIONS: Dict[RoleName, ResourcePermissions] = require_exhaustive(
    {
        RoleName.ADMIN: ADMIN_PERMISSIONS,
        RoleName.EDITOR: EDITOR_PERMISSIONS,
        RoleName.AUTHOR: AUTHOR_PERMISSIONS,
        RoleName.VIEWER: VIEWER_PERMISSIONS,
        RoleName.CONTRIBUTOR: CONTRIBUTOR_PERMISSIONS,
        RoleName.PUBLISHER: PUBLISHER_PERMISSIONS,
        RoleName.REVIEWER: REVIEWER_PERMISSIONS,
    },
    RoleName,
    "DEFAULT_ROLE_PERMISSIONS",
)


def check_non_empty_grants(
    table: Dict[RoleName, ResourcePermissions],
) -> Dict[RoleName, ResourcePermissions]:
    """Reject default grants whose permission set is empty.

    Absence is the only way a default table says "no access".
    """
    empty = [
        f"{role.value}:{resource.value}"
        for role, grants in table.items()
        for resource, perms in grants.items()
        if not perms
    ]
    if empty:
        raise RBACConsistencyError("DEFAULT_ROLE_PERMISSIONS", empty=empty)
    return table


check_non_empty_grants(DEFAULT_ROLE_PERMISSIONS)


def get_default_role_permissions(role_name: RoleName) -> Dict[Resource, Set[Permission]]:
    """
    Get the default resource permissions for a role name.

    Returns a new mapping on every call; callers may edit it freely
    without affecting other roles seeded from the same defaults.

    Args:
        role_name: The role to get default permissions for

    Returns:
        Mapping of resource to the set of permitted actions
    """
    grants = DEFAULT_ROLE_PERMISSIONS[RoleName(role_name)]
    return {resource: set(perms) for resource, perms in grants.items()}


def get_all_role_names() -> List[RoleName]:
    """Get all role names in declaration order."""
    return list(RoleName)
