from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel

from cms.domains.resources.validation import required_text


class ContactPayload(BaseModel):
    """Схема для отправки сообщения"""
    name: str = None
    email: EmailStr = None
    message: str = None

    model_config = ConfigDict(validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return required_text(v, "Name", max_length=255, strip=True)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        return required_text(v, "Email", max_length=255, strip=True)

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v):
        return required_text(v, "Message")


class ContactMessageResponse(BaseModel):
    """Схема для ответа с сообщением"""
    id: int
    name: str
    email: str
    message: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
