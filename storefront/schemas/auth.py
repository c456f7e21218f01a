"""Authentication schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from storefront.utils.formatting import format_date, format_mobile


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that missing or malformed values are reported
    by the user store with its per-field messages.
    """

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    confirm_password: str | None = Field(None, max_length=128)
    avatar: str | None = Field(None, max_length=500)


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserUpdate(BaseModel):
    """Profile update request. ``password`` + ``new_password`` rotate the password."""

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    avatar: str | None = Field(None, max_length=500)
    password: str | None = Field(None, max_length=128)
    new_password: str | None = Field(None, max_length=128)


class OrderSummary(BaseModel):
    """Order fields shown on a user's profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    address: str
    mobile: str
    total: Decimal
    delivered: bool
    paid: bool
    payment_date: datetime | None

    @field_serializer("mobile")
    def serialize_mobile(self, mobile: str) -> str:
        return format_mobile(mobile)

    @field_serializer("payment_date")
    def serialize_payment_date(self, payment_date: datetime | None) -> str | None:
        return format_date(payment_date) if payment_date else None


class UserResponse(BaseModel):
    """User information response (never includes credentials)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    avatar: str
    created_at: datetime
    updated_at: datetime


class UserWithOrdersResponse(UserResponse):
    """User information with the user's orders, when they were requested."""

    orders: list[OrderSummary] | None = None


class UserData(BaseModel):
    user: UserResponse


class UserEnvelope(BaseModel):
    """Standard success response wrapping a user."""

    message: str = "Success"
    data: UserData


class ProfileData(BaseModel):
    user: UserWithOrdersResponse


class ProfileEnvelope(BaseModel):
    """Success response for the current user's profile."""

    message: str = "Success"
    data: ProfileData


class MessageResponse(BaseModel):
    message: str = "Success"
