import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from cms.core.config import settings

logger = logging.getLogger(__name__)

# Длина колонки owner_id
MAX_SUBJECT_LENGTH = 64


class IdentityClaim:
    """Личность, подтвержденная токеном сессии. Живет в пределах одного запроса."""

    __slots__ = ("user_id", "email")

    def __init__(self, user_id: str, email: str):
        self.user_id = user_id
        self.email = email

    def to_dict(self) -> dict:
        return {"id": self.user_id, "email": self.email}

    def __eq__(self, other) -> bool:
        if not isinstance(other, IdentityClaim):
            return False
        return self.user_id == other.user_id and self.email == other.email

    def __repr__(self) -> str:
        return f"IdentityClaim(user_id={self.user_id}, email={self.email})"


class InvalidToken(Exception):
    """Токен не прошел проверку. Причина намеренно не уточняется."""


def create_access_token(user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Создание JWT токена сессии"""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> IdentityClaim:
    """Проверка подписи и срока действия токена, извлечение личности"""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug("Session token rejected: %s", e)
        raise InvalidToken() from e

    user_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        logger.debug("Session token rejected: missing identity claims")
        raise InvalidToken()
    if not 0 < len(user_id) <= MAX_SUBJECT_LENGTH:
        logger.debug("Session token rejected: subject length %d", len(user_id))
        raise InvalidToken()

    return IdentityClaim(user_id=user_id, email=email)


def verify_token(token: str) -> Optional[IdentityClaim]:
    """Проверка токена: личность или None"""
    try:
        return decode_access_token(token)
    except InvalidToken:
        return None
