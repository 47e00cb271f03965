"""Permission store."""
from typing import Any, Mapping

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.permission import Permission


class PermissionRepository:
    """SQLAlchemy-backed permission store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def update_by_id(self, permission_id: str, fields: Mapping[str, Any]) -> int:
        """
        Apply a partial update to a permission record and commit.

        Args:
            permission_id: Permission UUID
            fields: Column name to new value

        Returns:
            Number of rows affected
        """
        if not fields:
            return 0
        stmt = (
            update(Permission)
            .where(Permission.id == permission_id)
            .values(**fields)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount
