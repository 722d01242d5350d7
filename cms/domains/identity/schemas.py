from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserInfo(BaseModel):
    """Публичные данные пользователя из сессии"""
    id: str
    email: str


class SessionResponse(BaseModel):
    """Ответ на вход"""
    success: bool = True
    user: UserInfo


class VerifyResponse(BaseModel):
    """Ответ на проверку сессии"""
    isAdmin: bool
    user: Optional[UserInfo] = None
