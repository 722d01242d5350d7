"""Слой валидации: схема -> типизированное значение или список ошибок полей.

Исключения наружу не выходят, о HTTP-статусах слой ничего не знает.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

from cms.core.errors import FieldError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

BODY_FIELD = "body"
MALFORMED_BODY_MESSAGE = "Malformed JSON body"

_url_adapter = TypeAdapter(AnyUrl)

# Длина колонок image_url и image
URL_MAX_LENGTH = 2048


class ValidationResult(Generic[SchemaT]):
    """Результат проверки: value при успехе, errors при неудаче"""

    __slots__ = ("value", "errors")

    def __init__(self, value: Optional[SchemaT] = None, errors: Optional[List[FieldError]] = None):
        self.value = value
        self.errors = errors or []

    @property
    def ok(self) -> bool:
        return not self.errors

    def __repr__(self) -> str:
        return f"ValidationResult(ok={self.ok}, errors={self.errors})"


def validate(schema: Type[SchemaT], payload: Any) -> ValidationResult[SchemaT]:
    """Проверка уже разобранных данных"""
    try:
        return ValidationResult(value=schema.model_validate(payload))
    except ValidationError as e:
        return ValidationResult(errors=_to_field_errors(e))


def validate_json(schema: Type[SchemaT], raw: Union[bytes, str]) -> ValidationResult[SchemaT]:
    """Проверка сырого JSON тела запроса, включая некорректный JSON"""
    try:
        return ValidationResult(value=schema.model_validate_json(raw))
    except ValidationError as e:
        return ValidationResult(errors=_to_field_errors(e))


def _to_field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err["loc"]]
        field = ".".join(loc) if loc else BODY_FIELD
        errors.append(FieldError(field, _message(err)))
    return errors


def _message(err: dict) -> str:
    ctx = err.get("ctx") or {}
    if err["type"] == "value_error" and "error" in ctx:
        # Текст из ValueError валидатора без префикса pydantic
        return str(ctx["error"])
    if err["type"] == "json_invalid":
        return MALFORMED_BODY_MESSAGE
    return err["msg"]


# Общие правила полей, используются в field_validator схем

def required_text(value: Any, label: str, max_length: Optional[int] = None, strip: bool = False) -> Any:
    """Обязательная строка: длина без пробелов по краям в [1, max_length]"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{label} is required")
    if isinstance(value, str):
        trimmed = value.strip()
        if max_length is not None and len(trimmed) > max_length:
            raise ValueError(f"{label} must be at most {max_length} characters")
        if strip:
            return trimmed
    return value


def optional_url(value: Any, max_length: int = URL_MAX_LENGTH) -> Optional[str]:
    """Необязательный абсолютный URL; пустая строка означает отсутствие"""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Invalid URL")
    value = value.strip()
    if not value:
        return None
    if len(value) > max_length:
        raise ValueError(f"URL must be at most {max_length} characters")
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL") from None
    return value
