"""
Structured Logging Configuration

JSON-логирование для точек входа (CLI). Библиотечные модули только
получают логгер через logging.getLogger(__name__) и никогда не
настраивают handlers сами.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Final

# Корневой логгер проекта: модули src.* наследуют его handlers
DEFAULT_LOGGER_NAME: Final[str] = "src"


class JSONFormatter(logging.Formatter):
    """JSON formatter для структурированных логов"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "operation": getattr(record, "operation", None),
            "operand": getattr(record, "operand", None),
        }

        # None-поля не выводим
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "WARNING", logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Настройка JSON-логирования в stderr.

    Повторный вызов заменяет handlers, а не дублирует их.

    Args:
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя настраиваемого логгера

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если уровень неизвестен
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Получение логгера по имени"""
    return logging.getLogger(name)
