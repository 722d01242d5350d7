from typing import TYPE_CHECKING, Any, Dict, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.db.base import utcnow
from cms.db.models.contact import ContactMessage as ContactMessageModel
from cms.db.repositories.base import fail_store_operation

if TYPE_CHECKING:
    from cms.domains.contact.entities import ContactMessage


class ContactRepository:
    """Репозиторий для сообщений из формы обратной связи"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, fields: Dict[str, Any]) -> "ContactMessage":
        db_message = ContactMessageModel(**fields, created_at=utcnow())

        self.session.add(db_message)
        try:
            await self.session.commit()
            await self.session.refresh(db_message)
        except SQLAlchemyError as e:
            await fail_store_operation(self.session, "send", "message", e)
        return self._to_domain(db_message)

    async def list_all(self) -> List["ContactMessage"]:
        """Все сообщения, новые первыми"""
        try:
            result = await self.session.execute(
                select(ContactMessageModel)
                .order_by(ContactMessageModel.created_at.desc(), ContactMessageModel.id.desc())
            )
        except SQLAlchemyError as e:
            await fail_store_operation(self.session, "list", "messages", e)
        return [self._to_domain(message) for message in result.scalars().all()]

    def _to_domain(self, db_message: ContactMessageModel) -> "ContactMessage":
        from cms.domains.contact.entities import ContactMessage

        return ContactMessage(
            id=db_message.id,
            name=db_message.name,
            email=db_message.email,
            message=db_message.message,
            created_at=db_message.created_at
        )
