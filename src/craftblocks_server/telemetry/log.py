import sys
import logging
import structlog
from ..util.terminal_color import TerminalColorMarks

LOGGER_NAME = "craftblocks-server"

bound_logging_vars = structlog.contextvars.bound_contextvars


def __json_formatter() -> logging.Formatter:
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.dict_tracebacks,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def __text_formatter() -> logging.Formatter:
    return logging.Formatter(
        f"{TerminalColorMarks.BOLD}{TerminalColorMarks.GREEN}%(name)s |{TerminalColorMarks.END} %(asctime)s - %(levelname)s - %(message)s"
    )


def get_logger(format="text", level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    # one handler per process, even if config is reloaded
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if format == "json":
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(__json_formatter())
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(__text_formatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
