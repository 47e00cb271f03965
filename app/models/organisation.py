"""
Organisation models.

An organisation is a tenant owning roles and members. Organisations are
soft-deleted via the is_deleted flag and are invisible to lookups afterwards.
"""
from sqlalchemy import String, Text, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Organisation(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Organisation model representing a tenant in the system.

    Each organisation has its own roles (with permissions) and members.
    """
    __tablename__ = "organisations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    owner_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    creator_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Relationships
    owner = relationship(
        "User",
        foreign_keys=[owner_id],
        back_populates="owned_organisations"
    )
    creator = relationship(
        "User",
        foreign_keys=[creator_id],
        back_populates="created_organisations"
    )
    roles = relationship(
        "Role",
        back_populates="organisation",
        cascade="all, delete-orphan"
    )
    members = relationship(
        "OrganisationMember",
        back_populates="organisation",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Organisation(id={self.id}, name={self.name}, email={self.email})>"


class OrganisationMember(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Membership of a user in an organisation, optionally with a role.
    """
    __tablename__ = "organisation_members"

    organisation_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organisations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    role_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True
    )

    # Relationships
    organisation = relationship("Organisation", back_populates="members")
    user = relationship("User", back_populates="memberships")
    role = relationship("Role")

    def __repr__(self):
        return f"<OrganisationMember(id={self.id}, org_id={self.organisation_id}, user_id={self.user_id})>"
