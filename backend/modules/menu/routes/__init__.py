from .menu_routes import router

__all__ = ["router"]
