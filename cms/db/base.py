from datetime import datetime, timezone

from sqlalchemy import Column, DateTime

from cms.core.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Поля created_at / updated_at для всех таблиц с изменяемыми записями"""

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


__all__ = ["Base", "TimestampMixin", "utcnow"]
