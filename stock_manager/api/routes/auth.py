from fastapi import APIRouter, Cookie, Depends, Response
from typing import Optional

from ...config import Settings
from ...schemas.auth import LoginRequest, AuthResponse
from ...schemas.user import UserResponse
from ...services import AuthService
from ..dependencies import get_auth_service, get_settings

router = APIRouter(prefix="/auth", tags=["auth"])

REFRESH_COOKIE = "refreshToken"


def _set_refresh_cookie(response: Response, token: str, app_settings: Settings) -> None:
    response.set_cookie(
        REFRESH_COOKIE,
        token,
        httponly=True,
        secure=app_settings.is_production,
        samesite="lax",
        path=f"{app_settings.api_prefix}/auth/refresh",
        max_age=app_settings.refresh_token_expire_days * 24 * 60 * 60,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
        credentials: LoginRequest,
        response: Response,
        auth_service: AuthService = Depends(get_auth_service),
        app_settings: Settings = Depends(get_settings)
):
    """Check credentials, return an access token and set the refresh cookie"""
    tokens, user = await auth_service.login(credentials.email, credentials.password)
    _set_refresh_cookie(response, tokens.refresh_token, app_settings)
    return AuthResponse(access_token=tokens.access_token, user=UserResponse.model_validate(user))


@router.post("/refresh", response_model=AuthResponse)
async def refresh(
        response: Response,
        refresh_token: Optional[str] = Cookie(None, alias=REFRESH_COOKIE),
        auth_service: AuthService = Depends(get_auth_service),
        app_settings: Settings = Depends(get_settings)
):
    """Rotate both tokens using the refresh cookie"""
    tokens, user = await auth_service.refresh(refresh_token)
    _set_refresh_cookie(response, tokens.refresh_token, app_settings)
    return AuthResponse(access_token=tokens.access_token, user=UserResponse.model_validate(user))
