"""
Role model.

A role is a named permission bundle scoped to exactly one organisation.
"""
from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Role(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Role belonging to a single organisation."""
    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    organisation_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organisations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Relationships
    organisation = relationship("Organisation", back_populates="roles")
    permissions = relationship(
        "Permission",
        back_populates="role",
        cascade="all, delete-orphan",
        order_by="[Permission.created_at, Permission.id]"
    )

    def __repr__(self):
        return f"<Role(id={self.id}, name={self.name}, org_id={self.organisation_id})>"
