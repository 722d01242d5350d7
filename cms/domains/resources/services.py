"""Обработка запросов к ресурсам с владельцем.

Порядок проверок для изменяющих запросов фиксирован:
сессия -> идентификатор -> существование -> владелец -> тело запроса -> запись.
Проверка владельца и запись не атомарны: одновременные изменения одной записи
могут пройти проверку по устаревшим данным.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from cms.core.errors import (
    AuthenticationRequired, AuthorizationDenied, InvalidIdentifier, NotFound, ValidationFailed
)
from cms.core.security import IdentityClaim
from cms.domains.resources.access import AccessPolicy, Decision, OwnedRecord, authorize
from cms.domains.resources.store import ResourceStore
from cms.domains.resources.validation import validate_json

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=OwnedRecord)

# Идентификаторы хранятся как serial (int4)
MAX_RECORD_ID = 2 ** 31 - 1


class ResourceLabels:
    """Тексты ответов для одного типа ресурса"""

    def __init__(self, singular: str, plural: str):
        self.singular = singular
        self.plural = plural

    @property
    def not_found(self) -> str:
        return f"{self.singular.capitalize()} not found"

    @property
    def invalid_id(self) -> str:
        return f"Invalid {self.singular} ID"

    @property
    def forbidden_edit(self) -> str:
        return f"You can only edit your own {self.plural}"

    @property
    def forbidden_delete(self) -> str:
        return f"You can only delete your own {self.plural}"

    @property
    def deleted(self) -> str:
        return f"{self.singular.capitalize()} deleted successfully"


def parse_record_id(raw_id: str, labels: ResourceLabels) -> int:
    """Разбор идентификатора из пути; до обращения к хранилищу"""
    if not isinstance(raw_id, str) or not (raw_id.isascii() and raw_id.isdigit()):
        raise InvalidIdentifier(labels.invalid_id)
    record_id = int(raw_id)
    if not 0 < record_id <= MAX_RECORD_ID:
        raise InvalidIdentifier(labels.invalid_id)
    return record_id


class ResourceService(Generic[RecordT]):
    """Сервис CRUD для ресурса с политикой доступа"""

    def __init__(
        self,
        store: ResourceStore[RecordT],
        schema: Type[BaseModel],
        labels: ResourceLabels,
        policy: AccessPolicy = AccessPolicy.OWNER
    ):
        self.store = store
        self.schema = schema
        self.labels = labels
        self.policy = policy

    async def create(self, identity: Optional[IdentityClaim], body: Union[bytes, str]) -> RecordT:
        """Создание записи; владелец берется только из сессии"""
        self._require_identity(identity, "create")
        payload = self._validate(body)

        fields = payload.model_dump()
        fields["owner_id"] = identity.user_id if identity else None

        record = await self.store.insert(fields)
        logger.info(
            f"Created {self.labels.singular} {record.id}",
            extra={"resource": self.labels.singular, "resource_id": record.id,
                   "user_id": fields["owner_id"]},
        )
        return record

    async def get(self, raw_id: str) -> RecordT:
        """Получение записи по идентификатору (без авторизации)"""
        record_id = parse_record_id(raw_id, self.labels)
        record = await self.store.find_by_id(record_id)
        if record is None:
            raise NotFound(self.labels.not_found)
        return record

    async def list(self) -> List[RecordT]:
        """Все записи, новые первыми"""
        return await self.store.list_all()

    async def update(
        self,
        identity: Optional[IdentityClaim],
        raw_id: str,
        body: Union[bytes, str]
    ) -> RecordT:
        """Полное обновление записи владельцем"""
        self._require_identity(identity, "update")
        record = await self._load_for_mutation(identity, raw_id, self.labels.forbidden_edit)
        payload = self._validate(body)

        updated = await self.store.update(record.id, payload.model_dump())
        if updated is None:
            # Запись удалили между проверкой и записью
            raise NotFound(self.labels.not_found)
        return updated

    async def delete(self, identity: Optional[IdentityClaim], raw_id: str) -> None:
        """Удаление записи владельцем"""
        self._require_identity(identity, "delete")
        record = await self._load_for_mutation(identity, raw_id, self.labels.forbidden_delete)

        if not await self.store.delete(record.id):
            raise NotFound(self.labels.not_found)
        logger.info(
            f"Deleted {self.labels.singular} {record.id}",
            extra={"resource": self.labels.singular, "resource_id": record.id,
                   "user_id": identity.user_id if identity else None},
        )

    def _require_identity(self, identity: Optional[IdentityClaim], action: str) -> None:
        if identity is None and self.policy.requires_identity:
            logger.info(
                f"Rejected unauthenticated {action} of {self.labels.singular}",
                extra={"resource": self.labels.singular},
            )
            raise AuthenticationRequired()

    async def _load_for_mutation(
        self,
        identity: Optional[IdentityClaim],
        raw_id: str,
        forbidden_message: str
    ) -> RecordT:
        record = await self.get(raw_id)

        if self.policy is AccessPolicy.OWNER and authorize(identity, record) is Decision.DENY:
            logger.info(
                f"Denied change of {self.labels.singular} {record.id}",
                extra={"resource": self.labels.singular, "resource_id": record.id,
                       "user_id": identity.user_id},
            )
            raise AuthorizationDenied(forbidden_message)

        return record

    def _validate(self, body: Union[bytes, str]) -> BaseModel:
        result = validate_json(self.schema, body)
        if not result.ok:
            raise ValidationFailed(result.errors)
        return result.value
