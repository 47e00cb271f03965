"""
Organisation lifecycle and membership queries.

SECURITY: Member listings are only returned to members of the organisation.
"""
from typing import Any, Mapping

from fastapi import status

from app.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ServiceError,
)
from app.logging_config import get_logger
from app.models.organisation import Organisation
from app.repositories.organisation_repository import OrganisationRepository
from app.routes.metrics import track_organisation_event
from app.schemas.organisation import (
    MemberResponse,
    MemberRoleResponse,
    OrganisationCreateRequest,
    OrganisationResponse,
)
from app.sentry_config import capture_exception
from app.services.user_service import UserService


class OrganisationService:
    """Service for managing organisations."""

    def __init__(self, organisations: OrganisationRepository, users: UserService):
        self.organisations = organisations
        self.users = users

    async def create(self, payload: OrganisationCreateRequest, user_id: str) -> dict:
        """
        Create an organisation owned by the calling user.

        The owner is also recorded as the creator and added as a member.

        Raises:
            ConflictError: an organisation already uses the email
            NotFoundError: the user does not exist
        """
        if await self.organisations.email_exists(payload.email):
            raise ConflictError("Organisation with this email already exists")

        owner = await self.users.get_by_id(user_id)
        if owner is None:
            raise NotFoundError("User not found")

        organisation = Organisation(
            **payload.model_dump(),
            owner_id=owner.id,
            creator_id=owner.id,
        )
        organisation = await self.organisations.add(organisation, owner.id)

        get_logger(org_id=organisation.id, user_id=owner.id).info("organisation_created")
        track_organisation_event("created")
        return {
            "status": "success",
            "message": "organisation created successfully",
            "data": OrganisationResponse.model_validate(organisation),
        }

    async def update_organisation(self, org_id: str, changes: Mapping[str, Any]) -> dict:
        """
        Apply a partial update to an organisation and return the fresh record.

        Raises:
            NotFoundError: organisation missing or deleted
            InternalError: the update failed
        """
        try:
            organisation = await self.organisations.get_by_id(org_id)
            if organisation is None:
                raise NotFoundError("organisation not found")

            await self.organisations.update_by_id(org_id, changes)
            updated = await self.organisations.get_by_id(org_id)
        except ServiceError:
            raise
        except Exception as e:
            get_logger(org_id=org_id).error("organisation_update_failed", error=str(e))
            capture_exception(e)
            raise InternalError(f"An internal server error occurred: {e}") from e

        get_logger(org_id=org_id).info("organisation_updated", fields=sorted(changes))
        track_organisation_event("updated")
        return {
            "message": "Organisation successfully updated",
            "org": OrganisationResponse.model_validate(updated),
        }

    async def delete_organisation(self, org_id: str) -> int:
        """
        Soft-delete an organisation.

        Returns:
            HTTP 204

        Raises:
            NotFoundError: organisation missing or already deleted
            InternalError: the update failed
        """
        try:
            organisation = await self.organisations.get_by_id(org_id)
            if organisation is None:
                raise NotFoundError(f"Organisation with id: {org_id} not found")
            await self.organisations.soft_delete(organisation)
        except ServiceError:
            raise
        except Exception as e:
            get_logger(org_id=org_id).error("organisation_delete_failed", error=str(e))
            capture_exception(e)
            raise InternalError(f"An internal server error occurred: {e}") from e

        get_logger(org_id=org_id).info("organisation_deleted")
        track_organisation_event("deleted")
        return status.HTTP_204_NO_CONTENT

    async def get_organisation_members(
        self,
        org_id: str,
        page: int,
        page_size: int,
        user_id: str,
    ) -> dict:
        """
        List one page of an organisation's members.

        Args:
            org_id: Organisation UUID
            page: 1-based page number
            page_size: Members per page
            user_id: Caller, who must be a member

        Raises:
            NotFoundError: organisation missing or deleted
            ForbiddenError: caller is not a member
        """
        organisation = await self.organisations.get_with_members(org_id)
        if organisation is None:
            raise NotFoundError("No organisation found")

        members = [MemberResponse.model_validate(member.user) for member in organisation.members]
        if not any(member.id == user_id for member in members):
            raise ForbiddenError("User does not have access to the organisation")

        skip = (page - 1) * page_size
        return {
            "status_code": status.HTTP_200_OK,
            "message": "members retrieved successfully",
            "data": members[skip:skip + page_size],
        }

    async def get_user_organisations(self, user_id: str) -> dict:
        """
        List the organisations a user created, owns, or is a member of.

        Raises:
            NotFoundError: the user does not exist
            BadRequestError: the user has no organisations at all
        """
        user = await self.users.get_with_organisations(user_id)
        if user is None:
            raise NotFoundError("User not found")

        created = [
            OrganisationResponse.model_validate(org)
            for org in user.created_organisations if not org.is_deleted
        ]
        owned = [
            OrganisationResponse.model_validate(org)
            for org in user.owned_organisations if not org.is_deleted
        ]
        memberships = await self.organisations.get_member_organisations(user_id)
        member_orgs = [
            {
                "organisation": OrganisationResponse.model_validate(member.organisation),
                "role": MemberRoleResponse.model_validate(member.role) if member.role else None,
            }
            for member in memberships
        ]

        if not created and not owned and not member_orgs:
            raise BadRequestError("No organisation found for this user")

        return {
            "status_code": status.HTTP_200_OK,
            "message": "Organisations retrieved successfully",
            "data": {
                "created_organisations": created,
                "owned_organisations": owned,
                "member_organisations": member_orgs,
            },
        }
