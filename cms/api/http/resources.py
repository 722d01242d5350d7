"""Общие HTTP-маршруты для ресурсов с CRUD: список, чтение, создание, изменение, удаление.

Тело запроса читается как есть и передается сервису, чтобы проверка сессии
и владельца выполнялась раньше разбора JSON.
"""

from typing import Callable, Optional, Type

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.auth import get_current_identity
from cms.core.db import get_db
from cms.core.security import IdentityClaim
from cms.domains.resources.services import ResourceLabels, ResourceService


def build_resource_router(
    prefix: str,
    labels: ResourceLabels,
    service_factory: Callable[[AsyncSession], ResourceService],
    response_schema: Type[BaseModel],
    tags: Optional[list] = None
) -> APIRouter:
    """Роутер CRUD для одного ресурса; ключи ответа берутся из labels"""
    router = APIRouter(prefix=prefix, tags=tags or [labels.plural])

    def serialize(record) -> dict:
        return response_schema.model_validate(record).model_dump(mode="json", by_alias=True)

    @router.get("")
    async def list_records(db: AsyncSession = Depends(get_db)):
        records = await service_factory(db).list()
        return {labels.plural: [serialize(record) for record in records]}

    @router.get("/{record_id}")
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db)):
        record = await service_factory(db).get(record_id)
        return {labels.singular: serialize(record)}

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_record(
        request: Request,
        identity: Optional[IdentityClaim] = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db)
    ):
        body = await request.body()
        record = await service_factory(db).create(identity, body)
        return {"success": True, labels.singular: serialize(record)}

    @router.api_route("/{record_id}", methods=["PATCH", "PUT"])
    async def update_record(
        record_id: str,
        request: Request,
        identity: Optional[IdentityClaim] = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db)
    ):
        body = await request.body()
        record = await service_factory(db).update(identity, record_id, body)
        return {"success": True, labels.singular: serialize(record)}

    @router.delete("/{record_id}")
    async def delete_record(
        record_id: str,
        identity: Optional[IdentityClaim] = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db)
    ):
        await service_factory(db).delete(identity, record_id)
        return {"success": True, "message": labels.deleted}

    return router
