import uuid
from datetime import datetime, timezone
from typing import Optional

from passlib.context import CryptContext

# Контекст для хеширования паролей
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: str,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or self.created_at

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        # bcrypt учитывает только первые 72 байта
        return pwd_context.verify(password[:72], self.password_hash)

    @classmethod
    def create_user(cls, email: str, password: str, name: Optional[str] = None) -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=pwd_context.hash(password[:72]),
            name=name
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
