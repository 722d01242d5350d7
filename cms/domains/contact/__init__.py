from cms.domains.contact.entities import ContactMessage
from cms.domains.contact.schemas import ContactMessageResponse, ContactPayload
from cms.domains.contact.services import ContactService

__all__ = ["ContactMessage", "ContactMessageResponse", "ContactPayload", "ContactService"]
