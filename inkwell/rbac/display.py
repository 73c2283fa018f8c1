"""Presentation metadata for roles and resources.

Display names, descriptions and resource groups for UI layers. These
tables carry no decision semantics; each is checked against its
enumeration at import time.
"""

from enum import Enum
from typing import Dict, List, Optional

from .exceptions import RBACConsistencyError, require_exhaustive
from .permissions import LEGACY_RESOURCES, Resource
from .roles import RoleName


ROLE_DISPLAY_NAMES: Dict[RoleName, str] = require_exhaustive(
    {
        RoleName.ADMIN: "Administrator",
        RoleName.EDITOR: "Editor",
        RoleName.AUTHOR: "Author",
        RoleName.VIEWER: "Viewer",
        RoleName.CONTRIBUTOR: "Contributor",
        RoleName.PUBLISHER: "Publisher",
        RoleName.REVIEWER: "Reviewer",
    },
    RoleName,
    "ROLE_DISPLAY_NAMES",
)

ROLE_DESCRIPTIONS: Dict[RoleName, str] = require_exhaustive(
    {
        RoleName.ADMIN: "Full system access with ability to manage all resources, users, and settings.",
        RoleName.EDITOR: "Manages all content including articles, categories, tags, and media library.",
        RoleName.AUTHOR: "Creates and manages own articles and media uploads.",
        RoleName.VIEWER: "Read-only access to published content and analytics.",
        RoleName.CONTRIBUTOR: "Submits draft articles for review without publishing rights.",
        RoleName.PUBLISHER: "Publishes reviewed articles and manages published content lifecycle.",
        RoleName.REVIEWER: "Reviews and approves contributor submissions before publication.",
    },
    RoleName,
    "ROLE_DESCRIPTIONS",
)

RESOURCE_DISPLAY_NAMES: Dict[Resource, str] = require_exhaustive(
    {
        # Legacy
        Resource.ARTICLE_CREATE: "Create Articles (deprecated)",
        Resource.ARTICLE_READ: "Read Articles (deprecated)",

        Resource.ARTICLE_DRAFT: "Draft Articles",
        Resource.ARTICLE_PUBLISHED: "Published Articles",
        Resource.ARTICLE_ARCHIVED: "Archived Articles",
        Resource.USER_VIEW: "View Users",
        Resource.USER_MANAGE: "Manage Users (full)",
        Resource.CATEGORY_MANAGE: "Manage Categories",
        Resource.TAG_MANAGE: "Manage Tags",
        Resource.MEDIA_UPLOAD: "Upload Media",
        Resource.MEDIA_MANAGE: "Manage Media Library",
        Resource.ANALYTICS_VIEW: "View Analytics",
        Resource.SETTINGS_MANAGE: "Manage Settings",
    },
    Resource,
    "RESOURCE_DISPLAY_NAMES",
)


class ResourceGroup(str, Enum):
    """UI sections resources are organized into."""

    ARTICLES = "Articles"
    CONTENT_MANAGEMENT = "Content Management"
    USERS = "Users"
    ANALYTICS = "Analytics"
    SYSTEM = "System"


RESOURCE_GROUPS: Dict[ResourceGroup, List[Resource]] = require_exhaustive(
    {
        # Articles by content lifecycle status
        ResourceGroup.ARTICLES: [
            Resource.ARTICLE_DRAFT,
            Resource.ARTICLE_PUBLISHED,
            Resource.ARTICLE_ARCHIVED,
        ],
        ResourceGroup.CONTENT_MANAGEMENT: [
            Resource.CATEGORY_MANAGE,
            Resource.TAG_MANAGE,
            Resource.MEDIA_UPLOAD,
            Resource.MEDIA_MANAGE,
        ],
        ResourceGroup.USERS: [Resource.USER_VIEW, Resource.USER_MANAGE],
        ResourceGroup.ANALYTICS: [Resource.ANALYTICS_VIEW],
        ResourceGroup.SYSTEM: [Resource.SETTINGS_MANAGE],
    },
    ResourceGroup,
    "RESOURCE_GROUPS",
)


def build_group_index(
    groups: Dict[ResourceGroup, List[Resource]],
) -> Dict[Resource, ResourceGroup]:
    """Invert a group table, requiring one group per non-legacy resource."""
    index: Dict[Resource, ResourceGroup] = {}
    duplicated = []
    for group, resources in groups.items():
        for resource in resources:
            if resource in index:
                duplicated.append(resource.value)
            index[resource] = group

    missing = [r.value for r in Resource if r not in index and r not in LEGACY_RESOURCES]
    grouped_legacy = [r.value for r in LEGACY_RESOURCES if r in index]
    if missing or duplicated or grouped_legacy:
        raise RBACConsistencyError(
            "RESOURCE_GROUPS", missing=missing, unknown=duplicated + grouped_legacy
        )
    return index


_GROUP_BY_RESOURCE = build_group_index(RESOURCE_GROUPS)


def get_resource_group(resource: Resource) -> Optional[ResourceGroup]:
    """
    Find the group a resource belongs to.

    Returns None for resources in no group (the legacy resources).

    Example:
        get_resource_group(Resource.MEDIA_UPLOAD)  # ResourceGroup.CONTENT_MANAGEMENT
    """
    return _GROUP_BY_RESOURCE.get(resource)


def get_resources_in_group(group: ResourceGroup) -> List[Resource]:
    """Get the resources in a group, in display order."""
    return list(RESOURCE_GROUPS[ResourceGroup(group)])
