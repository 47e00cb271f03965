"""Tests for the role permission update workflow against in-memory stores."""
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.exceptions import InternalError, NotFoundError
from app.services.organisation_permissions_service import OrganisationPermissionsService

CHANGES = {"can_view_transactions": True, "can_edit_users": False}


def make_role(role_id="role_456", organisation_id="org_123", permission_ids=("perm_789",)):
    return SimpleNamespace(
        id=role_id,
        organisation_id=organisation_id,
        permissions=[SimpleNamespace(id=pid) for pid in permission_ids],
    )


def make_service(organisation=None, role=None, update=None, use_role_store=True):
    organisations = SimpleNamespace(get_by_id=AsyncMock(return_value=organisation))
    roles = SimpleNamespace(get_by_id=AsyncMock(return_value=role)) if use_role_store else None
    permissions = SimpleNamespace(update_by_id=update or AsyncMock(return_value=1))
    return OrganisationPermissionsService(organisations, roles, permissions), organisations, roles, permissions


class TestUpdatePermissions:
    """OrganisationPermissionsService.update_permissions."""

    async def test_updates_permission_successfully(self):
        service, _, roles, permissions = make_service(
            organisation=SimpleNamespace(id="org_123"), role=make_role()
        )

        result = await service.update_permissions("org_123", "role_456", CHANGES)

        assert result == {"message": "Permissions successfully updated", "status_code": 200}
        roles.get_by_id.assert_awaited_once_with("role_456", "org_123")
        permissions.update_by_id.assert_awaited_once_with("perm_789", CHANGES)

    async def test_missing_organisation_raises_not_found(self):
        service, _, roles, permissions = make_service(organisation=None)

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_permissions("org_id", "role_id", CHANGES)

        assert str(exc_info.value) == "Organization with ID org_id not found"
        assert exc_info.value.status_code == 404
        roles.get_by_id.assert_not_awaited()
        permissions.update_by_id.assert_not_awaited()

    @pytest.mark.parametrize("role_id", ["role_id", "other", ""])
    async def test_missing_organisation_ignores_role_and_changes(self, role_id):
        service, *_ = make_service(organisation=None)

        with pytest.raises(NotFoundError, match="Organization with ID missing not found"):
            await service.update_permissions("missing", role_id, {})

    async def test_missing_role_raises_not_found(self):
        service, _, _, permissions = make_service(organisation=SimpleNamespace(id="org_id"), role=None)

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_permissions("org_id", "role_id", CHANGES)

        assert str(exc_info.value) == "Role with ID role_id not found in the specified organization"
        permissions.update_by_id.assert_not_awaited()

    async def test_role_without_permissions_raises_not_found(self):
        service, _, _, permissions = make_service(
            organisation=SimpleNamespace(id="org_123"), role=make_role(permission_ids=())
        )

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_permissions("org_123", "role_456", CHANGES)

        assert str(exc_info.value) == "Permission not found in the specified role"
        permissions.update_by_id.assert_not_awaited()

    async def test_update_failure_raises_internal_error(self):
        update = AsyncMock(side_effect=RuntimeError("Update failed"))
        service, *_ = make_service(
            organisation=SimpleNamespace(id="org_123"), role=make_role(), update=update
        )

        with pytest.raises(InternalError) as exc_info:
            await service.update_permissions("org_123", "role_456", CHANGES)

        assert str(exc_info.value) == "Failed to update permissions: Update failed"
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        update.assert_awaited_once()

    async def test_not_found_from_lookup_is_not_wrapped(self):
        organisations = SimpleNamespace(get_by_id=AsyncMock(return_value=SimpleNamespace(id="org_123")))
        roles = SimpleNamespace(get_by_id=AsyncMock(side_effect=NotFoundError("gone")))
        permissions = SimpleNamespace(update_by_id=AsyncMock())
        service = OrganisationPermissionsService(organisations, roles, permissions)

        with pytest.raises(NotFoundError, match="gone"):
            await service.update_permissions("org_123", "role_456", CHANGES)

    async def test_updates_by_permission_id_not_role_or_organisation(self):
        service, _, _, permissions = make_service(
            organisation=SimpleNamespace(id="org_123"),
            role=make_role(permission_ids=("perm_a", "perm_b")),
        )

        await service.update_permissions("org_123", "role_456", CHANGES)

        permissions.update_by_id.assert_awaited_once_with("perm_a", CHANGES)


class TestUpdatePermissionsWithoutRoleStore:
    """Roles are filtered from the loaded organisation when no role store is given."""

    async def test_finds_role_in_loaded_organisation(self):
        organisation = SimpleNamespace(id="org_123", roles=[make_role("other"), make_role()])
        service, organisations, _, permissions = make_service(
            organisation=organisation, use_role_store=False
        )

        result = await service.update_permissions("org_123", "role_456", CHANGES)

        assert result["status_code"] == 200
        organisations.get_by_id.assert_awaited_once_with("org_123", include_roles=True)
        permissions.update_by_id.assert_awaited_once_with("perm_789", CHANGES)

    async def test_role_missing_from_loaded_organisation(self):
        organisation = SimpleNamespace(id="org_123", roles=[make_role("other")])
        service, _, _, permissions = make_service(organisation=organisation, use_role_store=False)

        with pytest.raises(NotFoundError, match="Role with ID role_456 not found"):
            await service.update_permissions("org_123", "role_456", CHANGES)

        permissions.update_by_id.assert_not_awaited()
