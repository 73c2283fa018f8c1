"""Pytest configuration and shared fixtures."""

import pytest

from inkwell.rbac import Permission, Resource, Role, RoleName, User


@pytest.fixture
def make_user():
    """Factory for users holding the given roles."""
    counter = {"n": 0}

    def _make_user(*roles: Role, is_active: bool = True) -> User:
        counter["n"] += 1
        n = counter["n"]
        return User(
            id=f"user_{n:03d}",
            email=f"user{n}@example.com",
            roles=list(roles),
            is_active=is_active,
        )

    return _make_user


@pytest.fixture
def viewer_role():
    """Viewer role customized to published articles only."""
    return Role(
        id="role_viewer_custom",
        name=RoleName.VIEWER,
        resources={Resource.ARTICLE_PUBLISHED: {Permission.READ}},
    )


@pytest.fixture
def author_role():
    return Role.from_defaults("role_author", RoleName.AUTHOR)


@pytest.fixture
def empty_admin_role():
    """Admin role with no stored grants at all."""
    return Role(id="role_admin_empty", name=RoleName.ADMIN, resources={})


@pytest.fixture
def sample_config():
    """Sample role catalog configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "log_dir": "/tmp/inkwell-logs",
            "file_logging": False,
        },
        "roles": [
            {"id": "role_author_default", "name": "author"},
            {
                "id": "role_reviewer_tenant_a",
                "name": "reviewer",
                "resources": {
                    "art_draft": ["read", "update"],
                    "art_published": ["read"],
                },
            },
        ],
    }
