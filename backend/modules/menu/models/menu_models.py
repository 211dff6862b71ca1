# backend/modules/menu/models/menu_models.py

from sqlalchemy import (Column, Integer, String, ForeignKey, Numeric,
                        Text, Boolean)
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Menu categories for organizing menu items"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)

    menu_items = relationship("MenuItem", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class MenuItem(Base, TimestampMixin):
    """Individual menu items"""
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    ingredients = Column(Text, nullable=True)
    dietary_type = Column(String(50), nullable=True)  # vegetarian, vegan, etc.
    is_available = Column(Boolean, nullable=False, default=True)
    image_url = Column(String(500), nullable=True)

    category = relationship("Category", back_populates="menu_items")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f"<MenuItem(id={self.id}, name='{self.name}', price={self.price})>"
