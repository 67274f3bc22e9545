"""
User Routes

POST /users/signup - Create account
POST /users/login - Authenticate, returns identity object
GET /users - List users
GET /users/{id} - Get user (with profile/startup ids)
PUT /users/{id} - Update email, user_type or password
DELETE /users/{id} - Delete user
"""

from fastapi import APIRouter, Depends

from internship_portal.core.auth import issue_token_for
from internship_portal.core.config import Settings, get_settings
from internship_portal.api.deps import get_user_service
from internship_portal.services.user_service import UserService
from internship_portal.schemas.schemas import (
    SignupRequest, LoginRequest, UserUpdate, AuthResponse, UserEnvelope,
    UserDetailEnvelope, UserListResponse, DeletedResponse
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/signup", response_model=AuthResponse, status_code=201)
def signup(
    data: SignupRequest,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new student or startup account.

    The response carries the identity object the client keeps and resends.
    """
    user = users.signup(data)
    return AuthResponse(
        message="User created successfully", user=user,
        access_token=issue_token_for(user, settings)
    )


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """Check credentials and return the user without its password."""
    user = users.login(data.email, data.password)
    return AuthResponse(
        message="Login successful", user=user,
        access_token=issue_token_for(user, settings)
    )


@router.get("", response_model=UserListResponse)
def list_users(users: UserService = Depends(get_user_service)):
    return UserListResponse(users=users.list_users())


@router.get("/{user_id}", response_model=UserDetailEnvelope)
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return UserDetailEnvelope(user=users.get_user(user_id))


@router.put("/{user_id}", response_model=UserEnvelope)
def update_user(user_id: int, data: UserUpdate, users: UserService = Depends(get_user_service)):
    """Only provided fields are updated; a new password is re-hashed."""
    return UserEnvelope(message="User updated", user=users.update_user(user_id, data))


@router.delete("/{user_id}", response_model=DeletedResponse)
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    return DeletedResponse(message="User deleted", id=users.delete(user_id))
