"""
Organisation role permission updates.

SECURITY: A permission record is only reachable through its role, and a
role only through its organisation. The full chain is confirmed before
anything is written.
"""
from typing import Any, Mapping

from fastapi import status

from app.exceptions import InternalError, NotFoundError
from app.logging_config import get_logger
from app.repositories.protocols import OrganisationStore, PermissionStore, RoleStore
from app.routes.metrics import track_permission_update
from app.sentry_config import capture_exception


class OrganisationPermissionsService:
    """Validates organisation → role → permission ownership and applies permission changes."""

    def __init__(
        self,
        organisations: OrganisationStore,
        roles: RoleStore | None,
        permissions: PermissionStore,
    ):
        self.organisations = organisations
        self.roles = roles
        self.permissions = permissions

    async def update_permissions(
        self,
        organisation_id: str,
        role_id: str,
        changes: Mapping[str, Any],
    ) -> dict:
        """
        Update the permission flags of a role.

        Args:
            organisation_id: Organisation UUID
            role_id: Role UUID, must belong to the organisation
            changes: Permission field name to new value

        Returns:
            {"message": ..., "status_code": 200}

        Raises:
            NotFoundError: organisation, role, or permission record missing
            InternalError: the update itself failed
        """
        log = get_logger(org_id=organisation_id, role_id=role_id)

        # Roles are only loaded through the organisation when no role store is injected
        organisation = await self.organisations.get_by_id(
            organisation_id, include_roles=self.roles is None
        )
        if organisation is None:
            track_permission_update("not_found")
            raise NotFoundError(f"Organization with ID {organisation_id} not found")

        role = await self._find_role(organisation, role_id)
        if role is None:
            track_permission_update("not_found")
            raise NotFoundError(f"Role with ID {role_id} not found in the specified organization")

        if not role.permissions:
            track_permission_update("not_found")
            raise NotFoundError("Permission not found in the specified role")

        permission = role.permissions[0]
        try:
            await self.permissions.update_by_id(permission.id, dict(changes))
        except Exception as e:
            log.error("permission_update_failed", permission_id=permission.id, error=str(e))
            capture_exception(e)
            track_permission_update("error")
            raise InternalError(f"Failed to update permissions: {e}") from e

        log.info("permissions_updated", permission_id=permission.id, fields=sorted(changes))
        track_permission_update("success")
        return {
            "message": "Permissions successfully updated",
            "status_code": status.HTTP_200_OK,
        }

    async def _find_role(self, organisation, role_id: str):
        if self.roles is not None:
            return await self.roles.get_by_id(role_id, organisation.id)
        return next((role for role in organisation.roles if role.id == role_id), None)
