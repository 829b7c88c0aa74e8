"""Post schema."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class Post(BaseModel):
    """A shared recipe post; ranking is computed by Supabase."""
    id: str = Field(..., description="Post identifier")
    title: str = Field(..., description="Post title")
    description: Optional[str] = Field(None, description="Post body")
    likes_count: int = Field(0, description="Number of likes")
    comments_count: int = Field(0, description="Number of comments")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    user_id: str = Field(..., description="Author")
