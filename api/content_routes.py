"""Favorite food, meal plan and post routes."""

from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from models.database import BackendClient
from schemas.favorite_food import FavoriteFood, FavoriteFoodCreate
from schemas.meal_plan import MealPlan, MealPlanCreate
from schemas.post import Post
from api.deps import get_backend, get_current_user_id
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


def _validated(rows: List[Dict[str, Any]], model) -> List[Dict[str, Any]]:
    """Rows exactly as stored; rows that do not fit ``model`` are logged."""
    for row in rows:
        try:
            model(**row)
        except Exception as e:
            logger.warning(f"Invalid {model.__name__} row: {e}, row: {row}")
    return rows


@router.get("/foods")
async def list_my_foods(
    user_id: str = Depends(get_current_user_id),
    backend: BackendClient = Depends(get_backend),
):
    """Caller's favorite foods, newest first."""
    rows = await backend.list_favorite_foods(user_id)
    logger.info(f"Retrieved {len(rows)} favorite foods for user_id: {user_id}")
    return _validated(rows, FavoriteFood)


@router.post("/foods", status_code=201)
async def create_food(
    food: FavoriteFoodCreate,
    user_id: str = Depends(get_current_user_id),
    backend: BackendClient = Depends(get_backend),
):
    """Save a favorite food owned by the caller."""
    row = food.model_dump(mode="json")
    row["user_id"] = user_id
    created = await backend.create_favorite_food(row)
    logger.info(f"Saved favorite food '{food.name}' for user_id: {user_id}")
    return created


@router.get("/users/{user_id}/foods")
async def list_public_foods(user_id: str, backend: BackendClient = Depends(get_backend)):
    """Another user's public favorite foods, newest first."""
    rows = await backend.list_favorite_foods(user_id, public_only=True)
    return _validated(rows, FavoriteFood)


@router.get("/meal-plans")
async def list_meal_plans(
    user_id: str = Depends(get_current_user_id),
    backend: BackendClient = Depends(get_backend),
):
    """Caller's meal plans, newest first."""
    rows = await backend.list_meal_plans(user_id)
    logger.info(f"Retrieved {len(rows)} meal plans for user_id: {user_id}")
    return _validated(rows, MealPlan)


@router.post("/meal-plans", status_code=201)
async def create_meal_plan(
    plan: MealPlanCreate,
    user_id: str = Depends(get_current_user_id),
    backend: BackendClient = Depends(get_backend),
):
    """Save a meal plan owned by the caller."""
    row = {
        key: value
        for key, value in plan.model_dump(mode="json", by_alias=True).items()
        if value is not None
    }
    row["user_id"] = user_id
    created = await backend.create_meal_plan(row)
    logger.info(f"Saved meal plan for user_id: {user_id}")
    return created


@router.get("/posts/trending")
async def trending_posts(backend: BackendClient = Depends(get_backend)):
    """Trending posts in the order Supabase ranks them."""
    rows = await backend.get_trending_posts()
    return _validated(rows, Post)
