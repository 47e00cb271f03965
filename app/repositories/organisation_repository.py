"""
SECURITY: Soft-deleted organisations MUST NOT be returned by lookups.
"""
from typing import Any, Mapping

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.organisation import Organisation, OrganisationMember
from app.models.role import Role


class OrganisationRepository:
    """SQLAlchemy-backed organisation store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, org_id: str, include_roles: bool = False) -> Organisation | None:
        """
        Get organisation by ID.

        Args:
            org_id: Organisation UUID
            include_roles: Also load roles and their permissions

        Returns:
            Organisation or None if not found or soft-deleted
        """
        stmt = select(Organisation).where(
            Organisation.id == org_id,
            Organisation.is_deleted.is_(False)
        ).execution_options(populate_existing=True)
        if include_roles:
            stmt = stmt.options(
                selectinload(Organisation.roles).selectinload(Role.permissions)
            )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_members(self, org_id: str) -> Organisation | None:
        """Get organisation by ID with members and their users loaded."""
        stmt = (
            select(Organisation)
            .where(Organisation.id == org_id, Organisation.is_deleted.is_(False))
            .options(selectinload(Organisation.members).selectinload(OrganisationMember.user))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check whether any organisation (deleted or not) uses this email."""
        stmt = select(Organisation.id).where(Organisation.email == email).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_member_organisations(self, user_id: str) -> list[OrganisationMember]:
        """Get a user's memberships in non-deleted organisations, with org and role loaded."""
        stmt = (
            select(OrganisationMember)
            .join(Organisation, OrganisationMember.organisation_id == Organisation.id)
            .where(
                OrganisationMember.user_id == user_id,
                Organisation.is_deleted.is_(False)
            )
            .options(
                selectinload(OrganisationMember.organisation),
                selectinload(OrganisationMember.role),
            )
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add(self, organisation: Organisation, owner_id: str) -> Organisation:
        """
        Persist a new organisation and make its owner a member.

        Args:
            organisation: Unsaved Organisation
            owner_id: User UUID of the owner

        Returns:
            The saved Organisation
        """
        self.db.add(organisation)
        await self.db.flush()
        self.db.add(OrganisationMember(organisation_id=organisation.id, user_id=owner_id))
        await self.db.commit()
        await self.db.refresh(organisation)
        return organisation

    async def update_by_id(self, org_id: str, fields: Mapping[str, Any]) -> int:
        """Apply a partial update to an organisation; return affected row count."""
        if not fields:
            return 0
        stmt = (
            update(Organisation)
            .where(Organisation.id == org_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount

    async def soft_delete(self, organisation: Organisation) -> None:
        """Mark an organisation as deleted."""
        organisation.is_deleted = True
        await self.db.commit()
