"""Logging utilities for glyphbadge."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering session."""

    rendered_count: int = 0
    error_count: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    render_times_ms: list[float] = field(default_factory=list)

    @property
    def total_time_ms(self) -> float:
        return sum(self.render_times_ms)

    @property
    def avg_render_time_ms(self) -> float | None:
        if not self.render_times_ms:
            return None
        return self.total_time_ms / len(self.render_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr and an optional file.

    Args:
        log_file: Path to log file (None disables file logging)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, only errors reach the console

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
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

    logger = structlog.get_logger("glyphbadge")
    logger.debug("Logging initialized", log_file=str(log_file), level=console_level)

    return logger


class RenderLogger:
    """Logger for tracking badge renders and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, status: str, label: str | None) -> None:
        """Log start of a badge render."""
        self._logger.debug("Rendering badge", status=status, label=label)

    def log_render_complete(
        self,
        status: str,
        width: int,
        height: int,
        duration_ms: float,
    ) -> None:
        """Log a successful badge render."""
        self._logger.info(
            "Badge rendered",
            status=status,
            width=width,
            height=height,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.render_times_ms.append(duration_ms)

    def log_render_error(self, status: str, error: Exception) -> None:
        """Log a failed badge render."""
        self._logger.error(
            "Badge render failed",
            status=status,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((status, str(error)))

    def log_cache_stats(self, hits: int, misses: int) -> None:
        """Record glyph cache counters."""
        self._logger.debug("Glyph cache", hits=hits, misses=misses)
        self._stats.cache_hits = hits
        self._stats.cache_misses = misses

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats


def get_logger(name: str = "glyphbadge") -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Before configure_logging has run, events are handed to the standard
    logging module instead of structlog's default stdout printer.
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
