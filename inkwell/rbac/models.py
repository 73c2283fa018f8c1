"""Role and user values consumed by the permission evaluator."""

from dataclasses import dataclass, field
from typing import Collection, Dict, List, Mapping

from .permissions import Permission, Resource
from .roles import RoleName, get_default_role_permissions


ResourceGrants = Mapping[Resource, Collection[Permission]]


@dataclass
class Role:
    """A role instance: an id, a role name and its resource grants.

    Several instances may share a name with different grants (per-tenant
    customization). A resource absent from ``resources`` grants nothing;
    an empty permission collection is treated the same way.

    Treat an instance as immutable while it is being evaluated. To change
    grants, build a new Role and swap the reference.
    """

    id: str
    name: RoleName
    resources: ResourceGrants = field(default_factory=dict)

    @classmethod
    def from_defaults(cls, id: str, name: RoleName) -> "Role":
        """Create a role seeded from the default permissions for ``name``."""
        role_name = RoleName(name)
        return cls(id=id, name=role_name, resources=get_default_role_permissions(role_name))

    @property
    def is_admin(self) -> bool:
        return self.name == RoleName.ADMIN


@dataclass
class User:
    """A principal holding zero or more role instances.

    ``is_active`` is carried for the host application; the evaluator does
    not consult it.
    """

    id: str
    email: str
    roles: List[Role] = field(default_factory=list)
    is_active: bool = True

    @property
    def role_names(self) -> List[RoleName]:
        return [role.name for role in self.roles]

    def to_dict(self) -> Dict[str, object]:
        """Convert to a plain dictionary, e.g. for API responses."""
        return {
            "id": self.id,
            "email": self.email,
            "is_active": self.is_active,
            "roles": [
                {
                    "id": role.id,
                    "name": RoleName(role.name).value,
                    "resources": {
                        Resource(resource).value: [p.value for p in Permission if p in perms]
                        for resource, perms in role.resources.items()
                    },
                }
                for role in self.roles
            ],
        }
