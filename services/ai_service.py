"""OpenRouter-compatible chat-completion client."""

import httpx
import json
from typing import Any, Dict, List, Optional
from pydantic import TypeAdapter, ValidationError
from config.ai_config import AI_CONFIG
from config.settings import settings
from prompts import MEAL_IDEAS_PROMPT, MEAL_IDEAS_SYSTEM_PROMPT, RECIPE_SUGGESTION_PROMPT
from schemas.recipe_suggestion import RecipeSuggestion
from utils.errors import ConfigurationError, InvalidResponseError, ParseError, UpstreamError
from utils.helpers import strip_code_fence
from utils.logger import setup_logger

logger = setup_logger(__name__)

_RECIPE_LIST = TypeAdapter(List[RecipeSuggestion])


class AIService:
    """Client for the AI chat-completion endpoint."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = settings.ai_api_url if api_url is None else api_url
        self.api_key = settings.ai_api_key if api_key is None else api_key
        self.timeout = settings.ai_request_timeout if timeout is None else timeout
        self._transport = transport

    def ensure_configured(self) -> None:
        if not self.api_url or not self.api_key:
            logger.error("AI API configuration missing")
            raise ConfigurationError("API configuration missing")

    async def chat_completion(self, payload: Dict[str, Any]) -> httpx.Response:
        """POST a chat-completion payload and return the raw response."""
        self.ensure_configured()
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": settings.site_url,
            "X-Title": settings.app_title,
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.post(self.api_url, headers=headers, json=payload)

    async def suggest_recipes(self, favorite_foods: List[str], count: int = 1) -> List[Dict[str, Any]]:
        """Ask for ``count`` structured recipes built around ``favorite_foods``.

        Args:
            favorite_foods: Food names the recipes should draw on
            count: Number of recipes requested

        Returns:
            The parsed JSON array, exactly as the model produced it
        """
        self.ensure_configured()
        prompt = RECIPE_SUGGESTION_PROMPT.format(
            favorite_foods=", ".join(favorite_foods),
            count=count,
        )
        payload = {
            "model": AI_CONFIG["recipe_suggestions"]["model"],
            "messages": [{"role": "user", "content": prompt}],
        }

        response = await self.chat_completion(payload)
        if not response.is_success:
            logger.error(f"Recipe suggestion API error {response.status_code}: {response.text}")
            raise UpstreamError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected recipe suggestion response shape: {e}")
            raise InvalidResponseError("Invalid response format from AI service")

        return self.parse_recipes(content or "")

    @staticmethod
    def parse_recipes(content: str) -> List[Dict[str, Any]]:
        """Parse and validate model output as a non-empty recipe array."""
        try:
            recipes = json.loads(strip_code_fence(content))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse recipe JSON: {e}")
            raise ParseError("Failed to parse recipe JSON")

        if not isinstance(recipes, list) or not recipes:
            logger.error("Recipe JSON is not a non-empty array")
            raise ParseError("Failed to parse recipe JSON")

        try:
            _RECIPE_LIST.validate_python(recipes)
        except ValidationError as e:
            logger.error(f"Recipe JSON failed validation: {e}")
            raise ParseError("Failed to parse recipe JSON", details=json.loads(e.json()))

        return recipes

    async def suggest_meals(self, prompt: str) -> Dict[str, Any]:
        """Ask for three plain-text meal ideas answering ``prompt``.

        Returns the raw chat-completion JSON. The plain-text layout is only
        requested from the model, never checked here.
        """
        config = AI_CONFIG["meal_ideas"]
        payload = {
            "model": config["model"],
            "messages": [
                {"role": "system", "content": MEAL_IDEAS_SYSTEM_PROMPT},
                {"role": "user", "content": MEAL_IDEAS_PROMPT.format(prompt=prompt)},
            ],
            "temperature": config["temperature"],
            "max_tokens": config["max_tokens"],
        }

        logger.info("Sending meal ideas request to AI service")
        response = await self.chat_completion(payload)

        if not response.is_success:
            try:
                error_data = response.json()
                logger.error(f"AI service error {response.status_code}: {json.dumps(error_data)}")
            except ValueError:
                logger.error(f"AI service error {response.status_code}: {response.text}")
            raise UpstreamError("AI service failed", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise InvalidResponseError("Invalid response format from AI service")

        choices = data.get("choices") if isinstance(data, dict) else None
        content = None
        if choices and isinstance(choices[0], dict):
            content = (choices[0].get("message") or {}).get("content")
        if not content:
            logger.error(f"AI service returned no completion content: {data}")
            raise InvalidResponseError("Invalid response format from AI service")

        return data
