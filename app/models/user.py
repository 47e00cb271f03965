"""
User model.

A user can create, own and belong to several organisations.
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model."""
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)

    # Relationships
    created_organisations = relationship(
        "Organisation",
        foreign_keys="Organisation.creator_id",
        back_populates="creator"
    )
    owned_organisations = relationship(
        "Organisation",
        foreign_keys="Organisation.owner_id",
        back_populates="owner"
    )
    memberships = relationship(
        "OrganisationMember",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
