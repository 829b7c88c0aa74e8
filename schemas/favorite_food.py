"""Favorite food table schemas."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from .enums import MealTime, Visibility


class FavoriteFoodCreate(BaseModel):
    """Fields a user supplies when saving a favorite food."""
    name: str = Field(..., min_length=1, description="Food name")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient names")
    recipe: str = Field("", description="Free-text recipe")
    rating: Optional[int] = Field(None, ge=1, le=5, description="Rating from 1 to 5")
    meal_types: List[MealTime] = Field(default_factory=list, description="Meal categories")
    visibility: Visibility = Field(Visibility.PUBLIC, description="Public or private")


class FavoriteFood(FavoriteFoodCreate):
    """Favorite food row as stored by Supabase."""
    id: str = Field(..., description="Row identifier")
    user_id: str = Field(..., description="Owning user")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
