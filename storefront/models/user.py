"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.enums import UserRole
from storefront.models.mixins import TimestampMixin

DEFAULT_AVATAR = "/img/user/default.jpg"


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    avatar = Column(String(500), nullable=False, default=DEFAULT_AVATAR)

    # Relationships
    orders = relationship("Order", back_populates="user", order_by="Order.id")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
