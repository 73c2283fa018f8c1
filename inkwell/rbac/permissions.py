"""Resource and permission vocabulary for Inkwell RBAC.

Both enumerations are closed: every table derived from them is checked
for exhaustive coverage when its module is imported.

Resource string format mirrors the stored role configuration:
  - art_draft
  - usr_manage
  - media_upload
"""

from enum import Enum
from typing import FrozenSet, List


class Resource(str, Enum):
    """Resources that can be protected by permissions."""

    # Legacy, kept so stored roles referencing them still load. Never granted
    # by default and not part of any resource group.
    ARTICLE_CREATE = "art_create"
    ARTICLE_READ = "art_read"

    # Articles by lifecycle status
    ARTICLE_DRAFT = "art_draft"
    ARTICLE_PUBLISHED = "art_published"
    ARTICLE_ARCHIVED = "art_archived"

    # Users
    USER_VIEW = "usr_view"
    USER_MANAGE = "usr_manage"

    # Content organization
    CATEGORY_MANAGE = "cat_manage"
    TAG_MANAGE = "tag_manage"

    # Media
    MEDIA_UPLOAD = "media_upload"
    MEDIA_MANAGE = "media_manage"

    ANALYTICS_VIEW = "analytics_view"
    SETTINGS_MANAGE = "settings_manage"


class Permission(str, Enum):
    """Actions that can be granted on a resource.

    No hierarchy: UPDATE does not imply READ.
    """

    CREATE = "create"  # POST
    READ = "read"      # GET
    UPDATE = "update"  # PUT/PATCH
    DELETE = "delete"  # DELETE


LEGACY_RESOURCES: FrozenSet[Resource] = frozenset([
    Resource.ARTICLE_CREATE,
    Resource.ARTICLE_READ,
])

# Every permission, for full-access grants
CRUD: FrozenSet[Permission] = frozenset(Permission)


def get_all_resources() -> List[Resource]:
    """Get every resource in declaration order, legacy members included."""
    return list(Resource)


def get_all_permissions() -> List[Permission]:
    """Get every permission in declaration order."""
    return list(Permission)
