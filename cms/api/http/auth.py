from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.auth import get_current_identity
from cms.core.config import settings
from cms.core.db import get_db
from cms.core.errors import AuthenticationRequired
from cms.core.security import IdentityClaim
from cms.domains.identity.schemas import SessionResponse, UserInfo, UserLogin, VerifyResponse
from cms.domains.identity.services import IdentityService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("/verify", response_model=VerifyResponse)
async def verify(identity: Optional[IdentityClaim] = Depends(get_current_identity)):
    """Проверка сессии. Никогда не возвращает ошибку."""
    if identity is None:
        return VerifyResponse(isAdmin=False, user=None)
    return VerifyResponse(isAdmin=True, user=UserInfo(**identity.to_dict()))


@router.post("/login", response_model=SessionResponse)
async def login(
    login_data: UserLogin,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """Вход пользователя: токен сессии выдается в HttpOnly cookie"""
    result = await IdentityService(db).login_user(login_data)

    if not result:
        raise AuthenticationRequired("Invalid credentials")

    user, token = result
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return SessionResponse(user=UserInfo(id=user.id, email=user.email))


@router.post("/logout")
async def logout():
    """Выход пользователя: удаление cookie и переход на главную"""
    response = RedirectResponse(settings.app_url, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return response
