from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from cms.domains.resources.validation import optional_url, required_text


class PortfolioPayload(BaseModel):
    """Схема для создания и обновления проекта портфолио"""
    title: str = None
    description: str = None
    image: Optional[str] = None

    model_config = ConfigDict(validate_default=True)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_text(v, "Title", max_length=255, strip=True)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return required_text(v, "Description")

    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v):
        return optional_url(v)


class PortfolioResponse(BaseModel):
    """Схема для ответа с данными проекта"""
    id: int
    title: str
    description: str
    image: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
