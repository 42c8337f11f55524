"""Structured logging for the catalog, built on stdlib logging and structlog."""
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_catalog.config.schemas.logging_schema import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

_configure_lock = threading.Lock()
_structlog_configured = False


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that adds caller information to every record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_formatter() -> DetailedFormatter:
    return DetailedFormatter(
        fmt=LOG_FORMAT,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        foreign_pre_chain=[
            structlog.stdlib.PositionalArgumentsFormatter(),
        ],
    )


def _configure_structlog() -> None:
    global _structlog_configured
    with _configure_lock:
        if _structlog_configured:
            return
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _structlog_configured = True


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the schema defaults are used
               (WARNING level, stdout only).

    Returns:
        Configured structlog logger for the package.
    """
    if config is None:
        from pattern_catalog.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    _configure_structlog()

    package_logger = logging.getLogger("pattern_catalog")
    package_logger.setLevel(getattr(logging, config.level.upper()))
    package_logger.propagate = False

    handlers: List[logging.Handler] = []
    formatter = _build_formatter()

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        package_logger.addHandler(handler)

    logger = get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the given stdlib logger name."""
    _configure_structlog()
    return structlog.get_logger(name)
