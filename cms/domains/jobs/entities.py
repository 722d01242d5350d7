from datetime import datetime
from typing import Optional


class Job:
    """Сущность вакансии"""

    def __init__(
        self,
        id: int,
        title: str,
        department: str,
        location: str,
        type: str,
        description: str,
        owner_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.department = department
        self.location = location
        self.type = type
        self.description = description
        self.owner_id = owner_id
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other) -> bool:
        if not isinstance(other, Job):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Job(id={self.id}, title={self.title})"
