import logging
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.errors import AuthenticationRequired, ValidationFailed
from cms.core.security import IdentityClaim
from cms.db.repositories.contact_repository import ContactRepository
from cms.domains.contact.entities import ContactMessage
from cms.domains.contact.schemas import ContactPayload
from cms.domains.resources.validation import validate_json

logger = logging.getLogger(__name__)


class ContactService:
    """Сервис формы обратной связи"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = ContactRepository(session)

    async def send_message(self, body: Union[bytes, str]) -> ContactMessage:
        """Сохранение сообщения посетителя (без авторизации)"""
        result = validate_json(ContactPayload, body)
        if not result.ok:
            raise ValidationFailed(result.errors)

        message = await self.repository.insert(result.value.model_dump())
        logger.info(f"Contact message {message.id} received", extra={"resource": "message"})
        return message

    async def list_messages(self, identity: Optional[IdentityClaim]) -> List[ContactMessage]:
        """Список сообщений; содержит email посетителей, поэтому только для вошедших"""
        if identity is None:
            raise AuthenticationRequired()
        return await self.repository.list_all()
