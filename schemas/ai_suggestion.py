"""Free-form AI suggestion schema."""

from pydantic import BaseModel, Field
from typing import Optional


class AISuggestionRequest(BaseModel):
    """Request body for free-form meal ideas."""
    prompt: Optional[str] = Field(None, description="User's free-text request")
