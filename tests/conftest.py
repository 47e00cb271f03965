"""
Shared fixtures: an in-memory SQLite database seeded with two organisations.

Layout:
    owner   - owns and is a member of acme and beta
    outsider - no organisations
    acme    - role "admin" with one permission record, role "empty" with none
    beta    - role "viewer" with one permission record
"""
from types import SimpleNamespace

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.models import Base, Organisation, OrganisationMember, Permission, Role, User


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seed(session_factory):
    """Create users, organisations, roles and permissions; return their IDs."""
    async with session_factory() as session:
        owner = User(email="owner@acme.com", first_name="Ada", last_name="Owner")
        outsider = User(email="outsider@example.com", first_name="Olu", last_name="Outsider")
        session.add_all([owner, outsider])
        await session.flush()

        acme = Organisation(name="Acme", email="hello@acme.com", owner_id=owner.id, creator_id=owner.id)
        beta = Organisation(name="Beta", email="hello@beta.com", owner_id=owner.id, creator_id=owner.id)
        session.add_all([acme, beta])
        await session.flush()

        admin_role = Role(name="admin", organisation_id=acme.id)
        empty_role = Role(name="empty", organisation_id=acme.id)
        viewer_role = Role(name="viewer", organisation_id=beta.id)
        session.add_all([admin_role, empty_role, viewer_role])
        await session.flush()

        admin_permission = Permission(role_id=admin_role.id, can_view_users=True)
        viewer_permission = Permission(role_id=viewer_role.id)
        session.add_all([admin_permission, viewer_permission])

        session.add_all([
            OrganisationMember(organisation_id=acme.id, user_id=owner.id, role_id=admin_role.id),
            OrganisationMember(organisation_id=beta.id, user_id=owner.id),
        ])
        await session.commit()

        return SimpleNamespace(
            owner_id=owner.id,
            owner_email=owner.email,
            outsider_id=outsider.id,
            outsider_email=outsider.email,
            acme_id=acme.id,
            beta_id=beta.id,
            admin_role_id=admin_role.id,
            empty_role_id=empty_role.id,
            viewer_role_id=viewer_role.id,
            admin_permission_id=admin_permission.id,
            viewer_permission_id=viewer_permission.id,
        )
