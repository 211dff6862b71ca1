# backend/modules/menu/schemas/menu_schemas.py

from typing import Optional

from pydantic import Field

from core.schemas import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)


class CategoryResponse(CamelModel):
    id: int
    name: str


class MenuItemCreate(CamelModel):
    """Fields are optional here so missing ones get a single readable message"""

    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[int] = None
    ingredients: Optional[str] = None
    dietary_type: Optional[str] = Field(None, max_length=50)
    is_available: bool = True
    image_url: Optional[str] = Field(None, max_length=500)


class MenuItemUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[int] = None
    ingredients: Optional[str] = None
    dietary_type: Optional[str] = Field(None, max_length=50)
    is_available: Optional[bool] = None
    image_url: Optional[str] = Field(None, max_length=500)


class MenuItemResponse(CamelModel):
    id: int
    name: str
    description: str
    price: float
    category_id: int
    category_name: Optional[str] = None
    ingredients: Optional[str] = None
    dietary_type: Optional[str] = None
    is_available: bool
    image_url: Optional[str] = None


class MenuItemCreated(CamelModel):
    menu_item_id: int
