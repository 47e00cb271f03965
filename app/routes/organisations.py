"""
Organisation API routes.

Provides endpoints for organisation lifecycle, members and role permissions.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.dependencies.auth import get_current_user, TokenPayload
from app.repositories.organisation_repository import OrganisationRepository
from app.repositories.permission_repository import PermissionRepository
from app.repositories.role_repository import RoleRepository
from app.schemas.organisation import OrganisationCreateRequest, OrganisationUpdateRequest
from app.schemas.permission import UpdatePermissionRequest
from app.services.organisation_permissions_service import OrganisationPermissionsService
from app.services.organisation_service import OrganisationService
from app.services.user_service import UserService


router = APIRouter(prefix="/api/v1/organisations", tags=["organisations"])


def get_organisation_service(db: AsyncSession = Depends(get_db)) -> OrganisationService:
    """Build an OrganisationService bound to the request session."""
    return OrganisationService(OrganisationRepository(db), UserService(db))


def get_permissions_service(db: AsyncSession = Depends(get_db)) -> OrganisationPermissionsService:
    """Build an OrganisationPermissionsService bound to the request session."""
    return OrganisationPermissionsService(
        organisations=OrganisationRepository(db),
        roles=RoleRepository(db),
        permissions=PermissionRepository(db),
    )


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_organisation(
    request: OrganisationCreateRequest,
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationService = Depends(get_organisation_service)
):
    """Create an organisation owned by the caller."""
    return await service.create(request, current_user.sub)


@router.get("/")
async def get_user_organisations(
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationService = Depends(get_organisation_service)
):
    """List the organisations the caller created, owns, or belongs to."""
    return await service.get_user_organisations(current_user.sub)


@router.patch("/{org_id}")
async def update_organisation(
    org_id: str,
    request: OrganisationUpdateRequest,
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationService = Depends(get_organisation_service)
):
    """Apply a partial update to an organisation."""
    return await service.update_organisation(org_id, request.model_dump(exclude_unset=True))


@router.delete("/{org_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_organisation(
    org_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationService = Depends(get_organisation_service)
):
    """Soft-delete an organisation."""
    status_code = await service.delete_organisation(org_id)
    return Response(status_code=status_code)


@router.get("/{org_id}/members")
async def get_organisation_members(
    org_id: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationService = Depends(get_organisation_service)
):
    """List a page of organisation members. Caller must be a member."""
    return await service.get_organisation_members(org_id, page, page_size, current_user.sub)


@router.patch("/{org_id}/roles/{role_id}/permissions")
async def update_role_permissions(
    org_id: str,
    role_id: str,
    request: UpdatePermissionRequest,
    current_user: TokenPayload = Depends(get_current_user),
    service: OrganisationPermissionsService = Depends(get_permissions_service)
):
    """Update the permission flags of a role in an organisation."""
    result = await service.update_permissions(org_id, role_id, request.changes())
    return JSONResponse(status_code=result["status_code"], content=result)
