from cms.domains.identity.entities import User
from cms.domains.identity.schemas import SessionResponse, UserInfo, UserLogin, VerifyResponse
from cms.domains.identity.services import IdentityService

__all__ = [
    "User",
    "SessionResponse", "UserInfo", "UserLogin", "VerifyResponse",
    "IdentityService"
]
