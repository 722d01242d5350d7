from enum import Enum
from typing import Optional, Protocol

from cms.core.security import IdentityClaim


class OwnedRecord(Protocol):
    id: int
    owner_id: Optional[str]


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


class AccessPolicy(str, Enum):
    """Кто может изменять записи ресурса"""

    PUBLIC = "none"
    AUTHENTICATED = "authenticated"
    OWNER = "owner"

    @property
    def requires_identity(self) -> bool:
        return self is not AccessPolicy.PUBLIC


def authorize(identity: IdentityClaim, record: OwnedRecord) -> Decision:
    """Изменять запись может только ее владелец. Ролей и исключений нет."""
    if record.owner_id is not None and identity.user_id == record.owner_id:
        return Decision.ALLOW
    return Decision.DENY
