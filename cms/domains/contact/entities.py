from datetime import datetime
from typing import Optional


class ContactMessage:
    """Сообщение из формы обратной связи"""

    def __init__(
        self,
        id: int,
        name: str,
        email: str,
        message: str,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.name = name
        self.email = email
        self.message = message
        self.created_at = created_at

    def __repr__(self) -> str:
        return f"ContactMessage(id={self.id}, email={self.email})"
