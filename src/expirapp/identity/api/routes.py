"""FastAPI endpoints for the Identity context."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from expirapp.identity.api.schemas import (
    RegisterUserRequest,
    UpdateUserRequest,
    UserIdResponse,
    UserListResponse,
    UserResponse,
)
from expirapp.identity.user.registration import RegisterUser, RemoveUser, UpdateUser
from expirapp.identity.user.user import User
from expirapp.shared.schemas import StatusResponse

router = APIRouter(prefix="/users", tags=["users"])


def _user_response(user) -> UserResponse:
    return UserResponse(
        user_id=str(user.id),
        name=user.name,
        email=user.email,
        registered_at=user.registered_at,
    )


@router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    result = current_domain.process(RegisterUser(name=body.name, email=body.email), asynchronous=False)
    return UserIdResponse(user_id=result)


@router.get("", response_model=UserListResponse)
async def list_users(page: int = 1, limit: int = 10) -> UserListResponse:
    result = current_domain.repository_for(User).list_page(page, limit)
    return UserListResponse(
        users=[_user_response(u) for u in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@router.get("/by-email", response_model=UserResponse)
async def find_user_by_email(email: str) -> UserResponse:
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None:
        raise ObjectNotFoundError(f"No user with email `{email}`")
    return _user_response(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return _user_response(current_domain.repository_for(User).get_live(user_id))


@router.patch("/{user_id}", response_model=StatusResponse)
async def update_user(user_id: str, body: UpdateUserRequest) -> StatusResponse:
    current_domain.process(UpdateUser(user_id=user_id, name=body.name, email=body.email), asynchronous=False)
    return StatusResponse()


@router.delete("/{user_id}", response_model=StatusResponse)
async def remove_user(user_id: str) -> StatusResponse:
    current_domain.process(RemoveUser(user_id=user_id), asynchronous=False)
    return StatusResponse()
