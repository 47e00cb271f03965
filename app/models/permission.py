"""
Permission model.

Capability flags attached to exactly one role. Created alongside the role
and only mutated through OrganisationPermissionsService.
"""
from sqlalchemy import String, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

PERMISSION_FLAGS = (
    "can_view_transactions",
    "can_view_refunds",
    "can_log_refunds",
    "can_view_users",
    "can_create_users",
    "can_edit_users",
    "can_blacklist_whitelist_users",
)


class Permission(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Set of capability flags owned by a role."""
    __tablename__ = "permissions"

    role_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    can_view_transactions: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_view_refunds: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_log_refunds: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_view_users: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_create_users: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit_users: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_blacklist_whitelist_users: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    role = relationship("Role", back_populates="permissions")

    def __repr__(self):
        return f"<Permission(id={self.id}, role_id={self.role_id})>"
