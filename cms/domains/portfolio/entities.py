from datetime import datetime
from typing import Optional


class PortfolioProject:
    """Сущность проекта портфолио"""

    def __init__(
        self,
        id: int,
        title: str,
        description: str,
        image: Optional[str] = None,
        owner_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.description = description
        self.image = image
        self.owner_id = owner_id
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other) -> bool:
        if not isinstance(other, PortfolioProject):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"PortfolioProject(id={self.id}, title={self.title})"
