"""
Request/response models for organisation endpoints.
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class OrganisationCreateRequest(BaseModel):
    """Request model for creating an organisation."""
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    email: EmailStr
    industry: str | None = Field(None, max_length=100)
    type: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    address: str | None = Field(None, max_length=500)
    state: str | None = Field(None, max_length=100)


class OrganisationUpdateRequest(BaseModel):
    """Partial update; only fields the client sends are applied."""
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    industry: str | None = Field(None, max_length=100)
    type: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    address: str | None = Field(None, max_length=500)
    state: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("name cannot be null")
        return value


class OrganisationResponse(BaseModel):
    """Organisation as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    email: str
    industry: str | None = None
    type: str | None = None
    country: str | None = None
    address: str | None = None
    state: str | None = None
    owner_id: str
    creator_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MemberResponse(BaseModel):
    """Organisation member as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    first_name: str
    last_name: str
    phone: str | None = None


class MemberRoleResponse(BaseModel):
    """Role summary attached to a membership."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
