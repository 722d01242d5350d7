"""Иерархия ошибок CMS.

Каждая ошибка несет код, HTTP-статус и текст для клиента. Тексты сообщений
являются частью контракта API: интерфейс и тесты сверяются с ними.
"""

from typing import List, Optional


class CMSError(Exception):
    """Базовое исключение для всех ожидаемых ошибок CMS"""

    code = "CMS_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class AuthenticationRequired(CMSError):
    """Нет сессии или токен недействителен"""

    code = "AUTHENTICATION_REQUIRED"
    http_status = 401

    def __init__(self, message: str = "Unauthorized. Please login first."):
        super().__init__(message)


class AuthorizationDenied(CMSError):
    """Сессия действительна, но пользователь не владелец ресурса"""

    code = "AUTHORIZATION_DENIED"
    http_status = 403


class FieldError:
    """Ошибка одного поля запроса"""

    __slots__ = ("field", "message")

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldError):
            return False
        return self.field == other.field and self.message == other.message

    def __repr__(self) -> str:
        return f"FieldError(field={self.field!r}, message={self.message!r})"


class ValidationFailed(CMSError):
    """Тело запроса не прошло проверку; содержит все нарушения сразу"""

    code = "VALIDATION_FAILED"
    http_status = 400

    def __init__(self, details: List[FieldError], message: str = "Validation failed"):
        super().__init__(message)
        self.details = list(details)

    def to_response(self) -> dict:
        return {
            "error": self.message,
            "details": [detail.to_dict() for detail in self.details],
        }


class NotFound(CMSError):
    """Запись с таким идентификатором не найдена"""

    code = "NOT_FOUND"
    http_status = 404


class InvalidIdentifier(NotFound):
    """Идентификатор не является допустимым числом"""

    code = "INVALID_IDENTIFIER"
    http_status = 400


class PersistenceFailure(CMSError):
    """Операция хранилища завершилась неожиданной ошибкой. Детали только в логах."""

    code = "PERSISTENCE_FAILURE"
    http_status = 500

    def __init__(self, action: str, resource: str, resource_id: Optional[int] = None):
        super().__init__(f"Failed to {action} {resource}")
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
