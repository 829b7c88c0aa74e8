"""Supabase client wrapper and table access."""

import httpx
from typing import Any, Dict, List, Optional
from postgrest.exceptions import APIError
from supabase import AsyncClient, AsyncClientOptions, acreate_client
from config.settings import settings
from utils.errors import BackendError, ConfigurationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

FAVORITE_FOODS_TABLE = "favorite_foods"
MEAL_PLANS_TABLE = "meal_plans"
TRENDING_POSTS_RPC = "get_trending_posts"


async def _close_client(client: AsyncClient, postgrest: bool) -> None:
    """Close a Supabase client's auth and, optionally, PostgREST sessions."""
    try:
        await client.auth.close()
        if postgrest:
            await client.postgrest.aclose()
    except Exception as e:
        logger.warning(f"Error closing Supabase client: {e}")


class BackendClient:
    """Supabase access for one process.

    The underlying ``AsyncClient`` uses the service credential and is created
    on first use, so a missing setting surfaces as a ``ConfigurationError``
    before any query is sent.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        service_key: Optional[str] = None,
        anon_key: Optional[str] = None,
    ):
        self.url = settings.supabase_url if url is None else url
        self.service_key = settings.supabase_service_role_key if service_key is None else service_key
        self.anon_key = settings.supabase_anon_key if anon_key is None else anon_key
        self._client: Optional[AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.service_key)

    async def get_client(self) -> AsyncClient:
        if not self.is_configured:
            logger.error("Supabase configuration missing")
            raise ConfigurationError("Supabase configuration missing")
        if self._client is None:
            self._client = await acreate_client(
                self.url,
                self.service_key,
                options=AsyncClientOptions(persist_session=False, auto_refresh_token=False),
            )
            logger.info(f"Connected to Supabase: {self.url}")
        return self._client

    async def close(self) -> None:
        """Close the HTTP sessions held by the shared client."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await _close_client(client, postgrest=True)

    async def _execute(self, query, action: str) -> Any:
        try:
            response = await query.execute()
        except APIError as e:
            logger.error(f"Supabase error while {action}: {e.message}")
            raise BackendError(f"Failed to {action}", details=e.message)
        except httpx.HTTPError as e:
            logger.error(f"Supabase request failed while {action}: {e}")
            raise BackendError(f"Failed to {action}", details=str(e))
        return response.data

    # Daily recipes

    async def get_daily_recipe(self, date: str) -> Any:
        """``recipe_data`` of the row for ``date``, or None."""
        client = await self.get_client()
        query = (
            client.table(settings.daily_recipes_table)
            .select("recipe_data")
            .eq("date", date)
            .limit(1)
        )
        rows = await self._execute(query, "fetch recipe")
        return rows[0]["recipe_data"] if rows else None

    async def get_latest_daily_recipe(self) -> Any:
        """``recipe_data`` of the row with the greatest date, or None."""
        client = await self.get_client()
        query = (
            client.table(settings.daily_recipes_table)
            .select("date, recipe_data")
            .order("date", desc=True)
            .limit(1)
        )
        rows = await self._execute(query, "fetch recipe")
        if not rows:
            return None
        logger.info(f"Most recent daily recipe is from {rows[0].get('date')}")
        return rows[0]["recipe_data"]

    # Favorite foods

    async def list_favorite_foods(self, user_id: str, public_only: bool = False) -> List[Dict[str, Any]]:
        client = await self.get_client()
        query = client.table(FAVORITE_FOODS_TABLE).select("*").eq("user_id", user_id)
        if public_only:
            query = query.eq("visibility", "public")
        return await self._execute(query.order("created_at", desc=True), "fetch favorite foods")

    async def create_favorite_food(self, row: Dict[str, Any]) -> Dict[str, Any]:
        client = await self.get_client()
        rows = await self._execute(client.table(FAVORITE_FOODS_TABLE).insert(row), "save favorite food")
        return rows[0]

    # Meal plans

    async def list_meal_plans(self, user_id: str) -> List[Dict[str, Any]]:
        client = await self.get_client()
        query = (
            client.table(MEAL_PLANS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        return await self._execute(query, "fetch meal plans")

    async def create_meal_plan(self, row: Dict[str, Any]) -> Dict[str, Any]:
        client = await self.get_client()
        rows = await self._execute(client.table(MEAL_PLANS_TABLE).insert(row), "save meal plan")
        return rows[0]

    # Posts

    async def get_trending_posts(self) -> List[Dict[str, Any]]:
        """Posts in the order ranked by the ``get_trending_posts`` procedure."""
        client = await self.get_client()
        rows = await self._execute(client.rpc(TRENDING_POSTS_RPC), "fetch trending posts")
        return rows or []

    # Auth

    async def get_user_id(self, access_token: str) -> Optional[str]:
        """Id of the user owning ``access_token``, or None if it is rejected."""
        client = await self.get_client()
        try:
            response = await client.auth.get_user(access_token)
        except Exception as e:
            logger.warning(f"Access token rejected: {e}")
            return None
        if not response or not response.user:
            return None
        return response.user.id

    async def exchange_code_for_session(self, code: str, code_verifier: Optional[str] = None):
        """Exchange an authorization code for a session.

        Uses a fresh client per call so the resulting session never lands on
        the shared service client.
        """
        if not self.is_configured:
            raise ConfigurationError("Supabase configuration missing")
        auth_client = await acreate_client(
            self.url,
            self.anon_key or self.service_key,
            options=AsyncClientOptions(
                persist_session=False,
                auto_refresh_token=False,
                flow_type="pkce",
            ),
        )
        params: Dict[str, Any] = {"auth_code": code}
        if code_verifier:
            params["code_verifier"] = code_verifier
        try:
            response = await auth_client.auth.exchange_code_for_session(params)
        finally:
            await _close_client(auth_client, postgrest=False)
        return response.session
