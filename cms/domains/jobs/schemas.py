from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from cms.domains.resources.validation import required_text


class JobPayload(BaseModel):
    """Схема для создания и обновления вакансии"""
    title: str = None
    department: str = None
    location: str = None
    type: str = None
    description: str = None

    model_config = ConfigDict(validate_default=True)

    @field_validator("title", "department", "location", mode="before")
    @classmethod
    def validate_short_text(cls, v, info):
        return required_text(v, info.field_name.capitalize(), max_length=255, strip=True)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        return required_text(v, "Type", max_length=100, strip=True)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return required_text(v, "Description")


class JobResponse(BaseModel):
    """Схема для ответа с данными вакансии"""
    id: int
    title: str
    department: str
    location: str
    type: str
    description: str
    owner_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
