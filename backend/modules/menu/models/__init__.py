# backend/modules/menu/models/__init__.py

from .menu_models import Category, MenuItem

__all__ = ["Category", "MenuItem"]
