"""Контракт хранилища записей.

Ядро работает только через этот протокол; реализация на SQLAlchemy
находится в cms.db.repositories. Каждая операция выполняет одну инструкцию,
транзакций между записями нет.
"""

from typing import Any, Dict, List, Optional, Protocol, TypeVar

RecordT = TypeVar("RecordT")


class ResourceStore(Protocol[RecordT]):
    async def insert(self, fields: Dict[str, Any]) -> RecordT: ...

    async def find_by_id(self, record_id: int) -> Optional[RecordT]: ...

    async def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[RecordT]: ...

    async def delete(self, record_id: int) -> bool: ...

    async def list_all(self) -> List[RecordT]:
        """Все записи, новые первыми (created_at desc)"""
        ...
