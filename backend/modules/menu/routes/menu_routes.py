# backend/modules/menu/routes/menu_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.schemas import MessageResponse

from ..schemas import (
    CategoryCreate,
    CategoryResponse,
    MenuItemCreate,
    MenuItemCreated,
    MenuItemResponse,
    MenuItemUpdate,
)
from ..services import MenuService

router = APIRouter(prefix="/api", tags=["Menu Management"])


def get_menu_service(db: Session = Depends(get_db)) -> MenuService:
    """Dependency to get menu service instance"""
    return MenuService(db)


@router.get("/menu", response_model=List[MenuItemResponse])
async def get_menu(menu_service: MenuService = Depends(get_menu_service)):
    """Menu for customers: available items only."""
    return menu_service.get_available_items()


@router.get("/menu/admin", response_model=List[MenuItemResponse])
async def get_admin_menu(menu_service: MenuService = Depends(get_menu_service)):
    """Every menu item, including unavailable ones."""
    return menu_service.get_all_items()


@router.post("/menu", response_model=MenuItemCreated, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    item_data: MenuItemCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    item = menu_service.create_item(item_data)
    return MenuItemCreated(menu_item_id=item.id)


@router.put("/menu/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    item_id: int,
    item_data: MenuItemUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Update only the fields present in the request body."""
    return menu_service.update_item(item_id, item_data)


@router.delete("/menu/{item_id}", response_model=MessageResponse)
async def delete_menu_item(
    item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    message = menu_service.delete_item(item_id)
    return MessageResponse(message=message)


@router.get("/categories", response_model=List[CategoryResponse])
async def get_categories(menu_service: MenuService = Depends(get_menu_service)):
    return menu_service.get_categories()


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.create_category(category_data)
