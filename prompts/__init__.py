"""Prompts for AI requests."""

from prompts.recipe_suggestion_prompt import RECIPE_SUGGESTION_PROMPT
from prompts.meal_ideas_prompt import MEAL_IDEAS_PROMPT, MEAL_IDEAS_SYSTEM_PROMPT

__all__ = [
    "RECIPE_SUGGESTION_PROMPT",
    "MEAL_IDEAS_PROMPT",
    "MEAL_IDEAS_SYSTEM_PROMPT",
]
