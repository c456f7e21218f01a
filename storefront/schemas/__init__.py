"""Pydantic schemas for API requests and responses."""

from storefront.schemas.auth import (
    MessageResponse,
    OrderSummary,
    ProfileEnvelope,
    UserEnvelope,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
    UserWithOrdersResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "UserWithOrdersResponse",
    "OrderSummary",
    "UserEnvelope",
    "ProfileEnvelope",
    "MessageResponse",
]
