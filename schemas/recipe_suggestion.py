"""AI recipe suggestion schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class RecipeSuggestion(BaseModel):
    """A recipe produced by the AI collaborator; never persisted."""
    model_config = ConfigDict(populate_by_name=True)
    
    name: str = Field(..., min_length=1, description="Recipe name")
    ingredients: List[str] = Field(..., min_length=1, description="Ingredients with measurements")
    instructions: List[str] = Field(..., min_length=1, description="Ordered cooking steps")
    prep_time: str = Field(..., alias="prepTime", description="Free-text preparation time")
    cook_time: str = Field(..., alias="cookTime", description="Free-text cooking time")
    servings: int = Field(..., description="Number of servings")


class RecipeSuggestionRequest(BaseModel):
    """Request body for recipe suggestions."""
    model_config = ConfigDict(populate_by_name=True)
    
    favorite_foods: List[str] = Field(..., alias="favoriteFoods", description="Favorite food names")
    count: int = Field(1, ge=1, le=10, description="Number of recipes to generate")
