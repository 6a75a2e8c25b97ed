"""
Logging — настройка структурированного логирования (structlog).

Модули получают логгер через structlog.get_logger(__name__).
configure_logging() вызывается приложением-потребителем один раз при старте;
библиотека сама логирование не настраивает.
"""

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Настройка structlog поверх стандартного logging.

    Args:
        level: Уровень логирования ("DEBUG", "INFO", ...)
        json_logs: JSON-вывод вместо консольного
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
