from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cms.domains.resources.validation import optional_url, required_text

TITLE_MAX_LENGTH = 255


class BlogPayload(BaseModel):
    """Схема для создания и обновления записи блога"""
    title: str = None
    content: str = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    model_config = ConfigDict(validate_default=True)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_text(v, "Title", max_length=TITLE_MAX_LENGTH, strip=True)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v):
        return required_text(v, "Content")

    @field_validator("image_url", mode="before")
    @classmethod
    def validate_image_url(cls, v):
        return optional_url(v)


class BlogResponse(BaseModel):
    """Схема для ответа с данными записи блога"""
    id: int
    title: str
    content: str
    image_url: Optional[str] = None
    owner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
