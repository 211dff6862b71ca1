# backend/modules/auth/models/user_models.py

import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin


class UserRole(str, enum.Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class User(Base, TimestampMixin):
    """Registered customer or staff account"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(30), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)

    reservations = relationship("Reservation", back_populates="user")
    orders = relationship("Order", back_populates="user")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
