"""Auth callback route."""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from config.settings import settings
from models.database import BackendClient
from api.deps import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, get_backend
from utils.helpers import build_redirect_url
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/callback")
async def auth_callback(
    request: Request,
    code: Optional[str] = Query(None, description="Authorization code from the email link"),
    backend: BackendClient = Depends(get_backend),
):
    """Exchange the authorization code for a session and redirect.

    The dashboard redirect happens whether or not the exchange succeeds; a
    failed exchange is only logged.
    """
    base_url = str(request.base_url)

    if not code:
        return RedirectResponse(
            build_redirect_url(base_url, settings.login_path, error="callback_error")
        )

    response = RedirectResponse(
        build_redirect_url(base_url, settings.dashboard_path, emailConfirmed="true")
    )

    try:
        session = await backend.exchange_code_for_session(
            code,
            code_verifier=request.cookies.get(settings.auth_code_verifier_cookie),
        )
    except Exception as e:
        logger.error(f"Error exchanging auth code for session: {e}")
        return response

    if session is not None:
        response.set_cookie(
            ACCESS_TOKEN_COOKIE,
            session.access_token,
            max_age=session.expires_in,
            httponly=True,
            samesite="lax",
        )
        response.set_cookie(REFRESH_TOKEN_COOKIE, session.refresh_token, httponly=True, samesite="lax")
        response.delete_cookie(settings.auth_code_verifier_cookie)
        logger.info("Auth code exchanged for session")
    return response
