import logging.config
from typing import Any, Literal

import orjson
import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.typing import Processor

logger = logging.getLogger(__name__)


LoggingLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json"]

# Chatty driver internals stay at WARNING unless asked otherwise
QUIET_LOGGERS = ("pymongo", "motor")

# Applied to records from both structlog and plain logging.getLogger loggers.
# Request scoped keys (request_id, method, path) come from contextvars.
SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    CallsiteParameterAdder(
        (
            CallsiteParameter.FUNC_NAME,
            CallsiteParameter.LINENO,
        ),
    ),
)


def _orjson_dumps(value: Any, **kwargs: Any) -> str:
    return orjson.dumps(value, default=kwargs.get("default")).decode()


def _renderers(log_format: LogFormat) -> tuple[Processor, ...]:
    if log_format == "json":
        return (
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(serializer=_orjson_dumps),
        )
    return (structlog.dev.ConsoleRenderer(),)


def build_formatter(log_format: LogFormat = "console") -> logging.Formatter:
    """Formatter for the root handler: one line per record in json mode"""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=(
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderers(log_format),
        ),
    )


def configure_logging(
        level: LoggingLevel = "INFO",
        log_format: LogFormat = "console",
) -> None:
    handler = logging.StreamHandler()
    handler.set_name("default")
    handler.setLevel(level)
    handler.setFormatter(build_formatter(log_format))

    logging.basicConfig(handlers=[handler], level=level)
    if level != "DEBUG":
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=(
            *SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger.info("Logging configured: level=%s, format=%s", level, log_format)
