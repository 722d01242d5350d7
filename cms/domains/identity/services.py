import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.security import create_access_token
from cms.db.repositories.user_repository import UserRepository
from cms.domains.identity.entities import User
from cms.domains.identity.schemas import UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для входа пользователей и выдачи токенов сессии"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = await self.user_repository.get_by_email(login_data.email)

        if not user or not user.authenticate(login_data.password):
            return None

        return user

    async def login_user(self, login_data: UserLogin) -> Optional[tuple]:
        """Вход пользователя: (пользователь, JWT токен) или None"""
        user = await self.authenticate_user(login_data)

        if not user:
            logger.info("Failed login attempt")
            return None

        logger.info("User logged in", extra={"user_id": user.id})
        return user, create_access_token(user.id, user.email)

    async def ensure_user(self, email: str, password: str, name: Optional[str] = None) -> User:
        """Создание пользователя, если его еще нет. Пароль существующего не меняется."""
        existing = await self.user_repository.get_by_email(email)
        if existing:
            return existing

        user = await self.user_repository.create(User.create_user(email, password, name))
        logger.info("Created user", extra={"user_id": user.id})
        return user
