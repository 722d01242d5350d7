import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cms.core.errors import CMSError, FieldError, PersistenceFailure, ValidationFailed

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


async def cms_error_handler(request: Request, exc: CMSError) -> JSONResponse:
    """Ожидаемые ошибки CMS: статус и тело берутся из самого исключения"""
    if isinstance(exc, PersistenceFailure):
        # На уровне ERROR с трассировкой пишет репозиторий
        logger.debug(
            exc.message,
            extra={"path": request.url.path, "error_code": exc.code,
                   "resource": exc.resource, "resource_id": exc.resource_id},
        )
    else:
        logger.info(
            f"{exc.code}: {exc.message}",
            extra={"path": request.url.path, "error_code": exc.code},
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Ошибки схем FastAPI приводятся к формату Validation failed"""
    details = []
    for err in exc.errors():
        # Первый элемент loc указывает источник (body, query, path)
        loc = [str(part) for part in err["loc"][1:]]
        details.append(FieldError(".".join(loc) if loc else "body", err["msg"]))

    error = ValidationFailed(details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CMSError, cms_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
