"""Per-use configuration for AI chat-completion requests."""

from typing import Dict, Any

# Keyed by the route that issues the request
AI_CONFIG: Dict[str, Any] = {
    "recipe_suggestions": {
        "model": "deepseek/deepseek-r1:free",
    },
    "meal_ideas": {
        "model": "mistralai/mistral-7b-instruct:free",
        "temperature": 0.7,
        "max_tokens": 500,
    },
}
