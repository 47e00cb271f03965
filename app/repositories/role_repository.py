"""
SECURITY: Role lookups MUST include the organisation_id filter.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.role import Role


class RoleRepository:
    """SQLAlchemy-backed role store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, role_id: str, organisation_id: str) -> Role | None:
        """
        Get a role by ID within a specific organisation.

        Args:
            role_id: Role UUID
            organisation_id: Organisation UUID (required for ownership check)

        Returns:
            Role with permissions loaded, or None if not found in the organisation
        """
        stmt = (
            select(Role)
            .where(
                Role.id == role_id,
                Role.organisation_id == organisation_id  # SECURITY: Enforce org ownership
            )
            .options(selectinload(Role.permissions))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
