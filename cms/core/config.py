from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Значения AccessPolicy
MutationPolicy = Literal["none", "authenticated", "owner"]


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./cms.sqlite3"
    database_echo: bool = False

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    # Cookie с токеном сессии
    session_cookie_name: str = "session"
    session_cookie_secure: bool = False

    api_prefix: str = "/api"
    app_url: str = "http://localhost:3000"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    log_level: str = "INFO"
    log_format: str = "json"

    # Политика изменения для ресурсов без обязательного владельца
    jobs_mutation_policy: MutationPolicy = "none"
    portfolio_mutation_policy: MutationPolicy = "none"

    # Начальный администратор (создается при старте, если задан)
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
