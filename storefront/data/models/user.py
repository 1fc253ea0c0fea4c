from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    phone = Column(String(50))
    address = Column(String(255))
    city = Column(String(100))
    postal_code = Column(String(20))
    country = Column(String(100))

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    carts = relationship("CartModel", back_populates="user", cascade="all, delete-orphan")
    orders = relationship("OrderModel", back_populates="user", cascade="all, delete-orphan")
