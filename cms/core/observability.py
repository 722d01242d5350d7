"""Структурированное логирование: JSON в продакшене, текст при разработке."""

import json
import logging
from datetime import datetime, timezone

# Дополнительные поля, которые попадают в JSON, если переданы через extra=
EXTRA_FIELDS = ("resource", "resource_id", "user_id", "path", "error_code")


class JSONFormatter(logging.Formatter):
    """Форматирование записей лога в одну JSON-строку"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Настройка корневого логгера. Вызывается один раз при старте."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_cms_handler", False):
            root.removeHandler(existing)
    handler._cms_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
