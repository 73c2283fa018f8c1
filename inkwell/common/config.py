"""Configuration management for Inkwell access control.

Handles loading and validation of YAML configuration files declaring
the host's role instances. A role without a ``resources`` section is
seeded from the default permissions for its name.

Example::

    logging:
      level: INFO
    roles:
      - id: role_author_default
        name: author
      - id: role_reviewer_tenant_a
        name: reviewer
        resources:
          art_draft: [read, update]
          art_published: [read]
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from inkwell.rbac.models import Role
from inkwell.rbac.permissions import Permission, Resource
from inkwell.rbac.roles import RoleName, get_default_role_permissions

from .logger import configure_logging
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class RoleConfigError(ValueError):
    """Raised when a role catalog entry is invalid."""


@dataclass
class LoggingConfig:
    """Logging section of the configuration file."""

    level: str = "INFO"
    log_dir: str = "/var/log/inkwell"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class AccessConfig:
    """Top-level configuration for Inkwell access control."""

    roles: List[Role] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_enum(enum_cls, value: Any, what: str, role_id: str):
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(m.value for m in enum_cls)
        raise RoleConfigError(
            f"Role {role_id!r}: unknown {what} {value!r} (expected one of: {valid})"
        ) from None


def parse_resources(
    resources_dict: Dict[str, Any], role_id: str
) -> Dict[Resource, Set[Permission]]:
    """Parse a ``resource: [permission, ...]`` mapping.

    Args:
        resources_dict: Mapping of resource values to permission value lists
        role_id: Owning role id, for error messages

    Returns:
        Mapping of Resource to a set of Permission

    Raises:
        RoleConfigError: On unknown names or an empty permission list
    """
    if not isinstance(resources_dict, dict):
        raise RoleConfigError(f"Role {role_id!r}: resources must be a mapping")

    resources: Dict[Resource, Set[Permission]] = {}
    for resource_value, permission_values in resources_dict.items():
        resource = _parse_enum(Resource, resource_value, "resource", role_id)
        if isinstance(permission_values, str):
            permission_values = [permission_values]
        if not permission_values:
            raise RoleConfigError(
                f"Role {role_id!r}: empty permission list for {resource.value} "
                f"(omit the resource to grant nothing)"
            )
        resources[resource] = {
            _parse_enum(Permission, p, "permission", role_id) for p in permission_values
        }
    return resources


def parse_role_config(role_dict: Dict[str, Any]) -> Role:
    """Parse a role configuration dictionary.

    Args:
        role_dict: Role configuration dictionary

    Returns:
        Role instance
    """
    role_id = role_dict.get("id")
    if not role_id:
        raise RoleConfigError(f"Role entry without an id: {role_dict!r}")
    role_id = str(role_id)

    name = _parse_enum(RoleName, role_dict.get("name"), "role name", role_id)

    if role_dict.get("resources") is None:
        resources = get_default_role_permissions(name)
    else:
        resources = parse_resources(role_dict["resources"], role_id)

    return Role(id=role_id, name=name, resources=resources)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse logging configuration dictionary."""
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/inkwell"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_config(config_dict: Dict[str, Any]) -> AccessConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        AccessConfig instance

    Raises:
        RoleConfigError: If a role entry is invalid or an id is repeated
    """
    roles = []
    seen: Set[str] = set()
    for role_dict in config_dict.get("roles") or []:
        role = parse_role_config(role_dict)
        if role.id in seen:
            raise RoleConfigError(f"Duplicate role id: {role.id!r}")
        seen.add(role.id)
        roles.append(role)

    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(config_dict["logging"] or {})

    return AccessConfig(roles=roles, logging=logging_config)


def get_role_by_id(config: AccessConfig, role_id: str) -> Optional[Role]:
    """Get a configured role by id, or None if not declared."""
    for role in config.roles:
        if role.id == role_id:
            return role
    return None


def load_config(config_path: str = "/etc/inkwell/roles.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = "/etc/inkwell/roles.yaml") -> AccessConfig:
    """Load and parse configuration into typed dataclasses.

    Args:
        config_path: Path to configuration file

    Returns:
        AccessConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        RoleConfigError: If a role entry is invalid
    """
    config = parse_config(load_config(config_path))
    logger.info("Loaded %d roles from %s", len(config.roles), config_path)
    return config


def load_access_config(settings: Optional[Settings] = None) -> AccessConfig:
    """Load the role catalog named by the settings and apply its logging section.

    Without ``roles_config_path`` no roles are declared and logging uses
    the LoggingConfig defaults.

    Args:
        settings: Settings instance, defaults to ``get_settings()``

    Returns:
        AccessConfig instance
    """
    settings = settings or get_settings()

    if settings.roles_config_path:
        config = parse_config(load_config(settings.roles_config_path))
    else:
        config = AccessConfig()

    configure_logging(config.logging)
    logger.info(
        "%s: %d roles configured (%s)",
        settings.app_name,
        len(config.roles),
        settings.roles_config_path or "no role catalog",
    )
    return config
