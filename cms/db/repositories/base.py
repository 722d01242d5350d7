import logging
from typing import Any, Dict, List, NoReturn, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.errors import PersistenceFailure
from cms.db.base import utcnow

logger = logging.getLogger(__name__)


async def fail_store_operation(
    session: AsyncSession,
    action: str,
    resource: str,
    error: SQLAlchemyError,
    record_id: Optional[int] = None
) -> NoReturn:
    """Откат сессии и замена ошибки хранилища на PersistenceFailure"""
    await session.rollback()
    logger.error(
        f"Store {action} failed for {resource}",
        exc_info=error,
        extra={"resource": resource, "resource_id": record_id},
    )
    raise PersistenceFailure(action, resource, record_id) from error


class SqlAlchemyRepository:
    """Базовый репозиторий записей с целочисленным id и полями времени.

    Реализует протокол ResourceStore. Подклассы задают model, resource_name
    и преобразование _to_domain.
    """

    model = None
    resource_name = "record"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, fields: Dict[str, Any]) -> Any:
        """Создание записи; created_at и updated_at совпадают"""
        now = utcnow()
        db_record = self.model(**fields, created_at=now, updated_at=now)

        self.session.add(db_record)
        try:
            await self.session.commit()
            await self.session.refresh(db_record)
        except SQLAlchemyError as e:
            await self._fail("create", e)
        return self._to_domain(db_record)

    async def find_by_id(self, record_id: int) -> Optional[Any]:
        """Получение записи по id"""
        try:
            result = await self.session.execute(
                select(self.model)
                .where(self.model.id == record_id)
                .execution_options(populate_existing=True)
            )
            db_record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail("fetch", e, record_id)
        return self._to_domain(db_record) if db_record else None

    async def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[Any]:
        """Обновление записи; None, если записи нет"""
        stmt = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**fields, updated_at=utcnow())
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("update", e, record_id)

        if result.rowcount == 0:
            return None
        return await self.find_by_id(record_id)

    async def delete(self, record_id: int) -> bool:
        """Удаление записи"""
        stmt = delete(self.model).where(self.model.id == record_id)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("delete", e, record_id)
        return result.rowcount > 0

    async def list_all(self) -> List[Any]:
        """Все записи, новые первыми"""
        try:
            result = await self.session.execute(
                select(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
            )
            db_records = result.scalars().all()
        except SQLAlchemyError as e:
            await self._fail("list", e)
        return [self._to_domain(record) for record in db_records]

    async def _fail(self, action: str, error: SQLAlchemyError, record_id: Optional[int] = None) -> NoReturn:
        await fail_store_operation(self.session, action, self.resource_name, error, record_id)

    def _to_domain(self, db_record):
        """Преобразование модели БД в доменную сущность"""
        raise NotImplementedError
