"""Shared FastAPI dependencies."""

from typing import Optional
from fastapi import Depends, Request
from models.database import BackendClient
from services.ai_service import AIService
from utils.errors import UnauthorizedError

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"


def get_backend(request: Request) -> BackendClient:
    """Process-wide Supabase client, created by the lifespan handler."""
    backend = getattr(request.app.state, "backend", None)
    if backend is None:
        backend = BackendClient()
        request.app.state.backend = backend
    return backend


def get_ai_service() -> AIService:
    return AIService()


def _access_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


async def get_current_user_id(
    request: Request,
    backend: BackendClient = Depends(get_backend),
) -> str:
    """Id of the signed-in caller, from a bearer token or session cookie."""
    token = _access_token(request)
    if not token:
        raise UnauthorizedError("Not authenticated")
    user_id = await backend.get_user_id(token)
    if not user_id:
        raise UnauthorizedError("Invalid or expired session")
    return user_id
