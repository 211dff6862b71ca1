# backend/modules/menu/services/menu_service.py

"""
Menu and category management.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from core.exceptions import ConflictError, InvalidInputError, NotFoundError, PersistenceError
from core.validators import optional_text, require_text

from ..models.menu_models import Category, MenuItem
from ..schemas.menu_schemas import CategoryCreate, MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)


class MenuService:
    """Service for menu items and categories"""

    def __init__(self, db: Session):
        self.db = db

    # Categories

    def get_categories(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.name).all()

    def create_category(self, data: CategoryCreate) -> Category:
        name = require_text(data.name, "Category name is required")
        if self.db.query(Category).filter(Category.name == name).first():
            raise ConflictError(f"Category '{name}' already exists")

        category = Category(name=name)
        try:
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Category '{name}' already exists")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create category")
            raise PersistenceError()

        logger.info(f"Created category {category.id} ({category.name})")
        return category

    # Menu items

    def get_available_items(self) -> List[MenuItem]:
        """Items customers can order, grouped by category name"""
        return self._items_query().filter(MenuItem.is_available == True).all()  # noqa: E712

    def get_all_items(self) -> List[MenuItem]:
        """All items for the admin dashboard, including unavailable ones"""
        return self._items_query().all()

    def get_item(self, item_id: int) -> MenuItem:
        item = self.db.get(MenuItem, item_id)
        if item is None:
            raise NotFoundError("Menu item not found", error_code="MENU_ITEM_NOT_FOUND")
        return item

    def create_item(self, data: MenuItemCreate) -> MenuItem:
        if not data.name or not data.description or data.price is None or data.category_id is None:
            raise InvalidInputError(
                "Missing required fields: name, description, price, categoryId"
            )

        item = MenuItem(
            name=require_text(data.name, "Name is required"),
            description=require_text(data.description, "Description is required"),
            price=self._validate_price(data.price),
            category_id=self._require_category(data.category_id).id,
            ingredients=optional_text(data.ingredients),
            dietary_type=optional_text(data.dietary_type),
            is_available=data.is_available,
            image_url=optional_text(data.image_url),
        )

        try:
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create menu item")
            raise PersistenceError()

        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    def update_item(self, item_id: int, data: MenuItemUpdate) -> MenuItem:
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise InvalidInputError("No fields provided for update")

        item = self.get_item(item_id)

        if "name" in changes:
            changes["name"] = require_text(changes["name"], "Name cannot be empty")
        if "description" in changes:
            changes["description"] = require_text(changes["description"], "Description cannot be empty")
        if "price" in changes:
            changes["price"] = self._validate_price(changes["price"])
        if "category_id" in changes:
            changes["category_id"] = self._require_category(changes["category_id"]).id
        if "is_available" in changes and changes["is_available"] is None:
            raise InvalidInputError("isAvailable must be true or false")

        for field, value in changes.items():
            setattr(item, field, value)

        try:
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to update menu item {item_id}")
            raise PersistenceError()

        logger.info(f"Updated menu item {item_id}: {', '.join(changes)}")
        return item

    def delete_item(self, item_id: int) -> str:
        """
        Delete a menu item. Items that appear on past orders are only marked
        unavailable so order history keeps its references.

        Returns:
            A message describing what was done
        """
        from modules.orders.models.order_models import OrderItem

        item = self.get_item(item_id)
        order_count = (
            self.db.query(OrderItem).filter(OrderItem.menu_item_id == item_id).count()
        )

        try:
            if order_count > 0:
                item.is_available = False
                self.db.commit()
                logger.info(f"Menu item {item_id} has {order_count} order lines, marked unavailable")
                return (
                    "Menu item has existing orders and has been marked as "
                    "unavailable instead of deleted"
                )

            self.db.delete(item)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to delete menu item {item_id}")
            raise PersistenceError()

        logger.info(f"Deleted menu item {item_id}")
        return "Menu item deleted successfully"

    def _items_query(self):
        return (
            self.db.query(MenuItem)
            .join(Category, MenuItem.category_id == Category.id)
            .options(joinedload(MenuItem.category))
            .order_by(Category.name, MenuItem.name)
        )

    def _require_category(self, category_id: Optional[int]) -> Category:
        category = self.db.get(Category, category_id) if category_id is not None else None
        if category is None:
            raise InvalidInputError("Please choose an existing category")
        return category

    @staticmethod
    def _validate_price(price) -> float:
        if price is None or price <= 0:
            raise InvalidInputError("Price must be greater than zero")
        return round(float(price), 2)
