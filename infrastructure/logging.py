import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import Settings, settings

_configured = False


def _build_handlers(config: Settings, formatter: logging.Formatter) -> list[logging.Handler]:
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    config.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.TimedRotatingFileHandler(
        config.log_dir / f"{config.app_env}.log",
        when="midnight",
        interval=1,
        backupCount=7,
    )
    file_handler.setFormatter(formatter)

    return [stream_handler, file_handler]


def setup_logging(config: Settings = settings) -> None:
    """Route structlog, uvicorn and stdlib logging through one set of handlers.

    Safe to call more than once; only the first call installs handlers.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return

    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.app_env == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *common_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=common_processors,
        processor=renderer,
    )
    handlers = _build_handlers(config, formatter)

    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level.upper())

    # Uvicorn installs its own handlers; replace them so access logs share the format
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = list(handlers)
        logging_logger.propagate = False

    _configured = True
