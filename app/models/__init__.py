"""
Database models.

Importing this package registers every model with Base.metadata so that
string-based relationships resolve regardless of import order.
"""
from app.models.base import Base
from app.models.user import User
from app.models.organisation import Organisation, OrganisationMember
from app.models.role import Role
from app.models.permission import Permission, PERMISSION_FLAGS

__all__ = [
    "Base",
    "User",
    "Organisation",
    "OrganisationMember",
    "Role",
    "Permission",
    "PERMISSION_FLAGS",
]
