"""
Structured logging.

Every record, ours or a library's, goes through one structlog pipeline:
request id from asgi-correlation-id, request fields bound by the
middleware, secrets masked, then JSON in production or console output
elsewhere.
"""

import logging
import sys
from typing import Any

import structlog
from asgi_correlation_id import correlation_id

from portal.config import get_settings

# event keys whose values never reach a log line
SENSITIVE_KEYS = frozenset({"password", "password_hash", "token", "authorization", "secret"})

# libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "passlib")


def add_request_id(logger, method_name, event_dict):
    request_id = correlation_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def mask_secrets(logger, method_name, event_dict):
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def _renderer(production: bool):
    return structlog.processors.JSONRenderer() if production else structlog.dev.ConsoleRenderer()


def configure_logging() -> None:
    settings = get_settings()
    production = settings.ENVIRONMENT == "production"

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_request_id,
        mask_secrets,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if production:
        shared.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(production),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.LOG_LEVEL.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
