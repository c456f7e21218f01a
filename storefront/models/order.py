"""Order model (read-only from the account endpoints)."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.mixins import TimestampMixin


class Order(Base, TimestampMixin):
    """An order placed by a user."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    address = Column(String(500), nullable=False)
    mobile = Column(String(30), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    delivered = Column(Boolean, nullable=False, default=False)
    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="orders")
