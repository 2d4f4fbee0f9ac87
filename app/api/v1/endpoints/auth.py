"""
Routes d'authentification des soignants.

POST /login, /refresh et /logout; GET /me avec un access token Bearer.
Les échecs sont des Problem Details 401, 403 ou 429.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import UnauthorizedError
from app.core.rate_limit import rate_limit_key
from app.models import Caregiver
from app.schemas.auth import LoginRequest, LogoutRequest, RefreshRequest, TokenResponse
from app.schemas.caregiver import CaregiverResponse
from app.services.auth import AuthService

router = APIRouter()
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(
    request: Request, session: AsyncSession = Depends(get_session)
) -> AuthService:
    return AuthService(session, request.app.state.settings)


async def get_current_caregiver(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Caregiver:
    """Soignant authentifié par l'en-tête `Authorization: Bearer <access token>`."""
    if credentials is None:
        raise UnauthorizedError(detail="Missing bearer token")
    return await auth.authenticate(credentials.credentials)


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    request: Request,
    auth: AuthService = Depends(get_auth_service),
):
    device_id = str(payload.device_id)
    request.app.state.rate_limiter.check(
        rate_limit_key(request, payload.email.lower(), device_id)
    )
    return await auth.login(payload.email, payload.password, device_id)


@router.post("/refresh", response_model=TokenResponse, response_model_exclude_none=True)
async def refresh(
    payload: RefreshRequest,
    request: Request,
    auth: AuthService = Depends(get_auth_service),
):
    device_id = str(payload.device_id) if payload.device_id else None
    request.app.state.rate_limiter.check(rate_limit_key(request, None, device_id))
    return await auth.refresh(payload.refresh_token, device_id, rotate=payload.rotate)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    payload: LogoutRequest,
    auth: AuthService = Depends(get_auth_service),
) -> Response:
    await auth.logout(payload.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=CaregiverResponse)
async def me(caregiver: Caregiver = Depends(get_current_caregiver)):
    return caregiver
