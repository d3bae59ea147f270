"""Logging utilities for findfont."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_PREFIX = "findfont."


@dataclass
class ScanStats:
    """Statistics from a single directory scan."""

    directories: list[str] = field(default_factory=list)
    files_seen: int = 0
    fonts_seen: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    def finish(self) -> "ScanStats":
        """Record the end time of the scan."""
        self.end_time = time.perf_counter()
        return self

    @property
    def duration_ms(self) -> float:
        """Scan duration in milliseconds."""
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000.0

    def log_summary(self, logger: structlog.stdlib.BoundLogger, event: str, **extra: object) -> None:
        """Emit a debug event describing the scan."""
        logger.debug(
            event,
            directories=len(self.directories),
            files_seen=self.files_seen,
            fonts_seen=self.fonts_seen,
            duration_ms=round(self.duration_ms, 2),
            **extra,
        )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_PREFIX + "file")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_PREFIX + "console")
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("findfont")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Events go through stdlib logging, so nothing is emitted until the
    application configures handlers (see ``configure_logging``).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
