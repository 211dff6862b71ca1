from .menu_schemas import (
    CategoryCreate,
    CategoryResponse,
    MenuItemCreate,
    MenuItemCreated,
    MenuItemResponse,
    MenuItemUpdate,
)

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "MenuItemCreate",
    "MenuItemCreated",
    "MenuItemResponse",
    "MenuItemUpdate",
]
