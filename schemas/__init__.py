"""Schemas organized by table or request type."""

from schemas.enums import MealTime, Visibility
from schemas.recipe_suggestion import RecipeSuggestion, RecipeSuggestionRequest
from schemas.ai_suggestion import AISuggestionRequest
from schemas.favorite_food import FavoriteFood, FavoriteFoodCreate
from schemas.meal_plan import DayMeal, Meal, MealPlan, MealPlanCreate
from schemas.post import Post

__all__ = [
    "MealTime",
    "Visibility",
    "RecipeSuggestion",
    "RecipeSuggestionRequest",
    "AISuggestionRequest",
    "FavoriteFood",
    "FavoriteFoodCreate",
    "DayMeal",
    "Meal",
    "MealPlan",
    "MealPlanCreate",
    "Post",
]
