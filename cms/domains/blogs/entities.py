from datetime import datetime
from typing import Optional


class Blog:
    """Сущность записи блога"""

    def __init__(
        self,
        id: int,
        title: str,
        content: str,
        owner_id: str,
        image_url: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.image_url = image_url
        self.owner_id = owner_id
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other) -> bool:
        if not isinstance(other, Blog):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Blog(id={self.id}, title={self.title}, owner_id={self.owner_id})"
