"""Enums for collection fields."""

from enum import Enum


class MealTime(str, Enum):
    """Meal slot, also used as the category of a favorite food."""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Visibility(str, Enum):
    """Who may see a favorite food."""
    PUBLIC = "public"
    PRIVATE = "private"
