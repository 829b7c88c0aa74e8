import asyncio
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from api.deps import get_ai_service, get_backend
from api.main import app
from models.database import BackendClient
from utils.errors import BackendError


class FakeSession:
    access_token = "access-123"
    refresh_token = "refresh-456"
    expires_in = 3600


class FakeBackend(BackendClient):
    """In-memory stand-in for Supabase."""

    def __init__(self):
        super().__init__(url="https://project.supabase.co", service_key="service-key")
        self.daily_recipes: Dict[str, Dict[str, Any]] = {}
        self.favorite_foods: List[Dict[str, Any]] = []
        self.meal_plans: List[Dict[str, Any]] = []
        self.trending: List[Dict[str, Any]] = []
        self.tokens: Dict[str, str] = {}
        self.fail_today = False
        self.fail_latest = False
        self.exchanged_codes: List[tuple] = []
        self.exchange_error: Optional[Exception] = None
        self.queries = 0

    async def get_daily_recipe(self, date):
        self.queries += 1
        if self.fail_today:
            raise BackendError("Failed to fetch recipe", details="connection reset")
        return self.daily_recipes.get(date)

    async def get_latest_daily_recipe(self):
        self.queries += 1
        if self.fail_latest:
            raise BackendError("Failed to fetch recipe", details="relation does not exist")
        if not self.daily_recipes:
            return None
        return self.daily_recipes[max(self.daily_recipes)]

    async def list_favorite_foods(self, user_id, public_only=False):
        rows = [f for f in self.favorite_foods if f["user_id"] == user_id]
        if public_only:
            rows = [f for f in rows if f.get("visibility") == "public"]
        return sorted(rows, key=lambda f: f["created_at"], reverse=True)

    async def create_favorite_food(self, row):
        stored = dict(row, id=f"food-{len(self.favorite_foods) + 1}", created_at="2024-05-01T12:00:00+00:00")
        self.favorite_foods.append(stored)
        return stored

    async def list_meal_plans(self, user_id):
        rows = [p for p in self.meal_plans if p["user_id"] == user_id]
        return sorted(rows, key=lambda p: p["created_at"], reverse=True)

    async def create_meal_plan(self, row):
        stored = dict(row, id=f"plan-{len(self.meal_plans) + 1}", created_at="2024-05-01T12:00:00+00:00")
        self.meal_plans.append(stored)
        return stored

    async def get_trending_posts(self):
        return list(self.trending)

    async def get_user_id(self, access_token):
        return self.tokens.get(access_token)

    async def exchange_code_for_session(self, code, code_verifier=None):
        self.exchanged_codes.append((code, code_verifier))
        if self.exchange_error is not None:
            raise self.exchange_error
        return FakeSession()


class FakeAIService:
    """Route-level stand-in for ``AIService``."""

    def __init__(self, recipes=None, meals=None, error: Optional[Exception] = None, hang: bool = False):
        self.recipes = recipes
        self.meals = meals
        self.error = error
        self.hang = hang
        self.calls: List[tuple] = []
        self.cancelled = False

    async def suggest_recipes(self, favorite_foods, count=1):
        self.calls.append(("recipes", list(favorite_foods), count))
        if self.error is not None:
            raise self.error
        return self.recipes

    async def suggest_meals(self, prompt):
        self.calls.append(("meals", prompt))
        if self.hang:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        if self.error is not None:
            raise self.error
        return self.meals


@pytest.fixture
def backend():
    fake = FakeBackend()
    app.dependency_overrides[get_backend] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_backend, None)


@pytest.fixture
def use_ai():
    """Install an AI service (a FakeAIService built from kwargs by default)."""
    def install(service=None, **kwargs):
        if service is None:
            service = FakeAIService(**kwargs)
        app.dependency_overrides[get_ai_service] = lambda: service
        return service

    yield install
    app.dependency_overrides.pop(get_ai_service, None)


@pytest.fixture
def client():
    return TestClient(app)
