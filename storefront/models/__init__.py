"""SQLAlchemy models."""

from storefront.models.order import Order
from storefront.models.user import User

__all__ = [
    "User",
    "Order",
]
