"""Recipe Suggestion Prompt."""

from langchain_core.prompts import PromptTemplate

RECIPE_SUGGESTION_PROMPT = PromptTemplate.from_template(
    """Based on these favorite foods: {favorite_foods},
suggest exactly {count} creative recipe(s) that incorporate some of these ingredients.

For each recipe, provide:
1. Recipe name
2. List of ingredients with measurements
3. Step-by-step cooking instructions
4. Preparation time
5. Cooking time
6. Number of servings

Respond with ONLY a valid JSON array of exactly {count} object(s), each shaped like:
{{
  "name": "Recipe Name",
  "ingredients": ["ingredient 1", "ingredient 2", ...],
  "instructions": ["step 1", "step 2", ...],
  "prepTime": "X minutes",
  "cookTime": "Y minutes",
  "servings": Z
}}"""
)
