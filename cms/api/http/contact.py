from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.auth import get_current_identity
from cms.core.db import get_db
from cms.core.security import IdentityClaim
from cms.domains.contact import ContactMessageResponse, ContactService

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def send_message(request: Request, db: AsyncSession = Depends(get_db)):
    """Отправка сообщения из формы обратной связи"""
    body = await request.body()
    await ContactService(db).send_message(body)
    return {"success": True}


@router.get("")
async def list_messages(
    identity: Optional[IdentityClaim] = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка сообщений"""
    messages = await ContactService(db).list_messages(identity)
    return {
        "messages": [
            ContactMessageResponse.model_validate(message).model_dump(mode="json", by_alias=True)
            for message in messages
        ]
    }
