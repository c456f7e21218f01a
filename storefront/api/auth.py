"""Authentication and profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import get_account_service, get_current_user
from storefront.models.user import User
from storefront.schemas.auth import (
    MessageResponse,
    ProfileEnvelope,
    UserEnvelope,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
    UserWithOrdersResponse,
)
from storefront.services.account import AccountService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def user_envelope(user: User) -> UserEnvelope:
    return UserEnvelope(data={"user": UserResponse.model_validate(user)})


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    response: Response,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user and start a session."""
    user = accounts.register(user_data.model_dump(exclude_none=True), response)
    return user_envelope(user)


@router.post("/signin", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def signin(
    credentials: UserLogin,
    response: Response,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Sign in with email and password."""
    user = accounts.sign_in(credentials.email, credentials.password, response)
    return user_envelope(user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Logout by clearing the session cookie."""
    accounts.sign_out(current_user, response)
    return MessageResponse()


@router.get("/me", response_model=ProfileEnvelope)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
    orders: bool = False,
):
    """Get current user information, with their orders if ``?orders=true``."""
    user = accounts.get_profile(current_user, include_orders=orders)
    if orders:
        profile = UserWithOrdersResponse.model_validate(user)
    else:
        profile = UserWithOrdersResponse(**UserResponse.model_validate(user).model_dump())
    return ProfileEnvelope(data={"user": profile})


@router.patch("/me", response_model=UserEnvelope)
def update_me(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Update the current user's profile; ``password`` + ``new_password`` change the password."""
    fields = user_data.model_dump(exclude_none=True, exclude={"password", "new_password"})
    user = accounts.update_profile(
        current_user,
        fields,
        password=user_data.password,
        new_password=user_data.new_password,
    )
    return user_envelope(user)
