"""Tests for the role catalog configuration module."""

import pytest
import tempfile
from pathlib import Path

import yaml

from inkwell.common.config import (
    AccessConfig,
    LoggingConfig,
    RoleConfigError,
    get_role_by_id,
    load_config,
    load_typed_config,
    parse_config,
    parse_logging_config,
    parse_resources,
    parse_role_config,
)
from inkwell.rbac.checker import user_can
from inkwell.rbac.models import User
from inkwell.rbac.permissions import Permission, Resource
from inkwell.rbac.roles import RoleName, get_default_role_permissions


class TestRoleConfig:
    """Tests for role entry parsing."""

    def test_parse_role_seeded_from_defaults(self):
        """Test a role without resources gets its name's defaults."""
        role = parse_role_config({"id": "role_author", "name": "author"})

        assert role.id == "role_author"
        assert role.name == RoleName.AUTHOR
        assert role.resources == get_default_role_permissions(RoleName.AUTHOR)

    def test_parse_role_with_resources(self):
        role = parse_role_config({
            "id": "role_viewer_custom",
            "name": "viewer",
            "resources": {"art_published": ["read"], "tag_manage": "read"},
        })

        assert role.resources == {
            Resource.ARTICLE_PUBLISHED: {Permission.READ},
            Resource.TAG_MANAGE: {Permission.READ},
        }

    def test_empty_resources_mapping_grants_nothing(self):
        role = parse_role_config({"id": "r", "name": "viewer", "resources": {}})
        assert role.resources == {}

    def test_numeric_id_coerced(self):
        role = parse_role_config({"id": 42, "name": "viewer"})
        assert role.id == "42"

    def test_missing_id(self):
        with pytest.raises(RoleConfigError):
            parse_role_config({"name": "viewer"})

    def test_unknown_role_name(self):
        with pytest.raises(RoleConfigError, match="unknown role name 'superuser'"):
            parse_role_config({"id": "r", "name": "superuser"})

    def test_unknown_resource(self):
        with pytest.raises(RoleConfigError, match="unknown resource"):
            parse_resources({"art_deleted": ["read"]}, "r")

    def test_unknown_permission(self):
        with pytest.raises(RoleConfigError, match="unknown permission 'publish'"):
            parse_resources({"art_draft": ["read", "publish"]}, "r")

    def test_empty_permission_list(self):
        with pytest.raises(RoleConfigError, match="empty permission list"):
            parse_resources({"art_draft": []}, "r")

    def test_resources_must_be_mapping(self):
        with pytest.raises(RoleConfigError):
            parse_resources(["art_draft"], "r")

    def test_role_config_error_is_value_error(self):
        assert issubclass(RoleConfigError, ValueError)


class TestLoggingConfig:
    """Tests for LoggingConfig parsing."""

    def test_parse_logging_defaults(self):
        config = parse_logging_config({})

        assert config.level == "INFO"
        assert not config.file_logging
        assert config.console_logging

    def test_parse_logging_custom(self):
        config = parse_logging_config({"level": "DEBUG", "file_logging": True, "log_dir": "/srv/logs"})

        assert config.level == "DEBUG"
        assert config.file_logging
        assert config.log_dir == "/srv/logs"


class TestAccessConfig:
    """Tests for full configuration parsing."""

    def test_parse_full_config(self, sample_config):
        config = parse_config(sample_config)

        assert isinstance(config, AccessConfig)
        assert [r.id for r in config.roles] == ["role_author_default", "role_reviewer_tenant_a"]
        assert config.logging.level == "DEBUG"
        assert config.logging.log_dir == "/tmp/inkwell-logs"

    def test_parse_empty_config(self):
        config = parse_config({})

        assert config.roles == []
        assert config.logging == LoggingConfig()

    def test_duplicate_role_ids(self):
        with pytest.raises(RoleConfigError, match="Duplicate role id"):
            parse_config({"roles": [
                {"id": "r1", "name": "viewer"},
                {"id": "r1", "name": "editor"},
            ]})

    def test_get_role_by_id(self, sample_config):
        config = parse_config(sample_config)

        reviewer = get_role_by_id(config, "role_reviewer_tenant_a")
        assert reviewer.name == RoleName.REVIEWER
        assert get_role_by_id(config, "missing") is None

    def test_configured_roles_drive_decisions(self, sample_config):
        config = parse_config(sample_config)
        reviewer = get_role_by_id(config, "role_reviewer_tenant_a")
        user = User(id="u1", email="u1@example.com", roles=[reviewer])

        assert user_can(user, Resource.ARTICLE_DRAFT, Permission.UPDATE)
        assert not user_can(user, Resource.TAG_MANAGE, Permission.READ)


class TestConfigLoading:
    """Tests for YAML config file loading."""

    def test_load_config_file(self, sample_config):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(sample_config, f)
            config_path = f.name

        try:
            config = load_config(config_path)
            assert config["roles"][0]["name"] == "author"
        finally:
            Path(config_path).unlink()

    def test_load_typed_config(self, tmp_path, sample_config):
        config_path = tmp_path / "roles.yaml"
        config_path.write_text(yaml.dump(sample_config))

        config = load_typed_config(str(config_path))

        assert len(config.roles) == 2
        assert config.roles[0].resources == get_default_role_permissions(RoleName.AUTHOR)

    def test_load_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/roles.yaml")

    def test_load_empty_file(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        assert load_config(str(config_path)) == {}

    def test_load_non_mapping_root(self, tmp_path):
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(TypeError):
            load_config(str(config_path))

    def test_env_vars_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("INKWELL_TENANT", "tenant_a")
        config_path = tmp_path / "roles.yaml"
        config_path.write_text(
            "roles:\n"
            "  - id: \"role_viewer_${INKWELL_TENANT}\"\n"
            "    name: viewer\n"
        )

        config = load_typed_config(str(config_path))

        assert config.roles[0].id == "role_viewer_tenant_a"
