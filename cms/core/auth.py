from typing import Optional

from fastapi import Request

from cms.core.config import settings
from cms.core.security import IdentityClaim, verify_token


def resolve_identity(request: Request) -> Optional[IdentityClaim]:
    """Личность из cookie сессии или None. Исключений не выбрасывает."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    return verify_token(token)


async def get_current_identity(request: Request) -> Optional[IdentityClaim]:
    """Зависимость FastAPI: текущая личность (может отсутствовать)"""
    return resolve_identity(request)
