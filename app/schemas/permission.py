"""
Request model for role permission updates.
"""
from pydantic import BaseModel, ConfigDict


class UpdatePermissionRequest(BaseModel):
    """
    Permission flags to change on a role.

    Omitted fields are left untouched.
    """
    model_config = ConfigDict(extra="forbid")

    can_view_transactions: bool | None = None
    can_view_refunds: bool | None = None
    can_log_refunds: bool | None = None
    can_view_users: bool | None = None
    can_create_users: bool | None = None
    can_edit_users: bool | None = None
    can_blacklist_whitelist_users: bool | None = None

    def changes(self) -> dict[str, bool]:
        """Return only the fields the client actually set."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
