import logging
import sys
from pathlib import Path

from loguru import logger

from src.app.runtime.config.config_data import LoggingConfig
from src.app.runtime.context import get_config

# Records the request middleware already reports with context
_MIDDLEWARE_OWNED = {"uvicorn.access"}

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<magenta>{extra[service]}</magenta> "
    "<cyan>{extra[request_id]}</cyan> "
    "{name}:{line} | <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records into loguru, tagged with their logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name in _MIDDLEWARE_OWNED:
            return
        if record.name == "uvicorn.error" and record.levelno >= logging.ERROR:
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose_tracebacks: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else CONSOLE_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
    )


def _route_stdlib_logging(library_levels: dict[str, str]) -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        existing = logging.getLogger(name)
        existing.handlers = []
        existing.propagate = True
    for name, level in library_levels.items():
        logging.getLogger(name).setLevel(level.upper())


def configure_logging() -> None:
    """Install the console and file sinks and route stdlib logging through loguru.

    Every record carries ``service`` and ``request_id`` extras; the request
    middleware overrides ``request_id`` while a request is in flight.
    """
    config = get_config()
    cfg = config.logging
    verbose_tracebacks = config.app.environment != "production"

    logger.remove()
    logger.configure(extra={"service": cfg.service_name, "request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose_tracebacks)

    _route_stdlib_logging(cfg.library_levels)

    logger.bind(
        level=cfg.level, format=cfg.format, file=cfg.file, environment=config.app.environment
    ).info("Logging configured for {}", cfg.service_name)
