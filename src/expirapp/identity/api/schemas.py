"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from expirapp.shared.schemas import PageMeta


class RegisterUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Ana Torres", "email": "ana@example.com"}]}}

    name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., max_length=254)


class UpdateUserRequest(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=100)
    email: str | None = Field(None, max_length=254)


class UserIdResponse(BaseModel):
    user_id: str


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    registered_at: datetime | None = None


class UserListResponse(PageMeta):
    users: list[UserResponse]
