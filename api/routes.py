"""Recipe and AI suggestion routes."""

import asyncio
import httpx
from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from config.settings import settings
from models.database import BackendClient
from schemas.ai_suggestion import AISuggestionRequest
from schemas.recipe_suggestion import RecipeSuggestionRequest
from services.ai_service import AIService
from services.daily_recipe_service import get_recipe_of_the_day
from api.deps import get_ai_service, get_backend
from utils.errors import AppError, RequestTimeoutError, ValidationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


@router.get("/recipe-of-the-day")
async def recipe_of_the_day(backend: BackendClient = Depends(get_backend)) -> Dict[str, Any]:
    """Today's recipe payload, or the most recent one available."""
    try:
        return await get_recipe_of_the_day(backend)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error fetching recipe: {e}", exc_info=True)
        raise AppError("Failed to fetch recipe", details=str(e))


@router.post("/recipe-suggestions")
async def recipe_suggestions(
    request: RecipeSuggestionRequest,
    ai_service: AIService = Depends(get_ai_service),
) -> List[Dict[str, Any]]:
    """Generate structured recipes from the caller's favorite foods."""
    try:
        recipes = await ai_service.suggest_recipes(request.favorite_foods, request.count)
        logger.info(f"Generated {len(recipes)} recipe suggestion(s)")
        return recipes
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error generating recipe suggestions: {e}", exc_info=True)
        raise AppError("Internal server error")


@router.post("/ai-suggestions")
async def ai_suggestions(
    request: AISuggestionRequest,
    ai_service: AIService = Depends(get_ai_service),
) -> Dict[str, Any]:
    """Free-form meal ideas, bounded by ``ai_request_timeout``.

    When the timer wins the outbound request is cancelled.
    """
    if not request.prompt or not request.prompt.strip():
        raise ValidationError("Prompt is required")

    try:
        return await asyncio.wait_for(
            ai_service.suggest_meals(request.prompt),
            timeout=settings.ai_request_timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.warning(f"AI suggestion timed out after {settings.ai_request_timeout}s")
        raise RequestTimeoutError("Request took too long to complete. Please try again.")
    except AppError:
        raise
    except Exception as e:
        logger.error(f"AI suggestion error: {e}", exc_info=True)
        raise AppError("Failed to get AI suggestions")
