"""
Store interfaces consumed by the organisation services.

Services depend on these protocols rather than on AsyncSession directly so
that stores can be swapped (e.g. fakes in tests).
"""
from typing import Any, Mapping, Optional, Protocol

from app.models.organisation import Organisation
from app.models.role import Role


class OrganisationStore(Protocol):
    """Organisation lookups."""

    async def get_by_id(self, org_id: str, include_roles: bool = False) -> Optional[Organisation]:
        """Get a non-deleted organisation by ID, optionally with its roles loaded."""
        ...


class RoleStore(Protocol):
    """Role lookups, always scoped to an organisation."""

    async def get_by_id(self, role_id: str, organisation_id: str) -> Optional[Role]:
        """Get a role of the given organisation, with its permissions loaded."""
        ...


class PermissionStore(Protocol):
    """Permission mutations."""

    async def update_by_id(self, permission_id: str, fields: Mapping[str, Any]) -> int:
        """Apply a partial update to one permission record; return affected row count."""
        ...
