import logging
import re
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Some third-party loggers repeat the message in an extra `color_message` key.
    This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def _is_configured() -> bool:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return True
    return False


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the propconf package"""

    # Leave an application that already set up structlog handlers alone
    if _is_configured():
        logging.getLogger().setLevel(log_level.upper())
        return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class PropConfStructLogger:
    """
    Structured logger for the propconf package.

    `bind` returns a new logger carrying local key-value context, while
    `bind_context` stores values in context variables so that every log
    line emitted in the current context includes them.
    """

    def __init__(self, log_name: str = "propconf", logger=None):
        self.log_name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, *args, **new_values: Any) -> "PropConfStructLogger":
        """
        Return a logger with extra values bound to its local context.

        Args:
            *args: Objects that have a 'key' attribute (bound under their snake_case class name)
            **new_values: Key-value pairs to bind
        """
        for arg in args:
            if hasattr(arg, 'key'):
                new_values[self._to_snake_case(type(arg).__name__)] = arg.key
            else:
                self.logger.error(
                    "Unsupported argument when trying to bind logger context",
                    argument_type=type(arg).__name__
                )
        return PropConfStructLogger(self.log_name, self.logger.bind(**new_values))

    @staticmethod
    def bind_context(**new_values: Any):
        """Bind values to the context variables shared by all loggers"""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind(*keys: str):
        """Unbind keys from the context variables"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_propconf_logger(log_name: str = "propconf") -> PropConfStructLogger:
    """Return a structured logger without touching the logging configuration."""
    return PropConfStructLogger(log_name)


def init_logger(settings):
    """
    Initialize the structured logger for propconf package.

    Args:
        settings: LibrarySettings object with logging settings

    Returns:
        PropConfStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if settings.debug else settings.log_level

    setup_logging(json_logs=settings.json_logs, log_level=log_level)

    return PropConfStructLogger("propconf")
