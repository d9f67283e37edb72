import atexit
import logging
from pathlib import Path
from typing import TextIO

import structlog

# Un handle por archivo de log, reutilizado entre llamadas a setup_logging
_log_files: dict[Path, TextIO] = {}


def _log_file(log_dir: Path) -> TextIO:
    path = (log_dir / "dinero.log").resolve()
    handle = _log_files.get(path)
    if handle is None or handle.closed:
        handle = path.open("a", encoding="utf-8")
        _log_files[path] = handle
    return handle


@atexit.register
def close_log_files() -> None:
    for handle in _log_files.values():
        handle.close()
    _log_files.clear()


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> None:
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        processors.append(structlog.processors.JSONRenderer())
        logger_factory = structlog.PrintLoggerFactory(file=_log_file(log_dir))
    else:
        processors.append(structlog.dev.ConsoleRenderer())
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )
