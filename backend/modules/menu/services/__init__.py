from .menu_service import MenuService

__all__ = ["MenuService"]
