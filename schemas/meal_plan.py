"""Meal plan table schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import datetime
from .enums import MealTime


class Meal(BaseModel):
    """A meal placed in a plan, usually a copy of a favorite food."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Meal identifier")
    name: str = Field(..., description="Meal name")
    ingredients: Optional[List[str]] = Field(None, description="Ingredient names")
    day: Optional[int] = Field(None, ge=0, description="Day index within the plan")
    meal_time: Optional[MealTime] = Field(None, alias="mealTime", description="Meal slot")


class DayMeal(BaseModel):
    """The meals planned for one day; an empty slot is null."""
    breakfast: Optional[Meal] = None
    lunch: Optional[Meal] = None
    dinner: Optional[Meal] = None
    snack: Optional[Meal] = None


class MealPlanCreate(BaseModel):
    """Fields a user supplies when saving a meal plan."""
    name: Optional[str] = Field(None, description="Plan name")
    plan: Dict[str, DayMeal] = Field(default_factory=dict, description="Meals keyed by day label")
    duration: Optional[int] = Field(None, ge=1, description="Plan length in days")
    no_repeat: bool = Field(False, description="Whether a food may appear only once")
    start_date: Optional[datetime] = Field(None, description="First day of the plan")
    end_date: Optional[datetime] = Field(None, description="Last day of the plan")


class MealPlan(MealPlanCreate):
    """Meal plan row as stored by Supabase."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Row identifier")
    user_id: str = Field(..., description="Owning user")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
