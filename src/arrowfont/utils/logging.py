"""Logging utilities for Arrowfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from arrowfont.core.geometry import signed_area
from arrowfont.domain import OutlinePolygon


@dataclass
class OutlineStats:
    """Statistics from outline computations."""

    outlines_computed: int = 0
    degenerate_count: int = 0
    glyphs_built: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

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

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("arrowfont")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OutlineLogger:
    """Logger for tracking outline computations and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OutlineStats()

    def log_outline(
        self,
        triangle_size: float,
        angle_deg: float,
        stroke_width: float,
        outline: OutlinePolygon,
    ) -> None:
        """Log a computed chevron outline.

        Outlines flagged degenerate by the outliner (parallel legs) are
        counted separately.
        """
        degenerate = outline.degenerate
        self._logger.info(
            "Outline computed",
            size=triangle_size,
            angle=angle_deg,
            width=stroke_width,
            area=round(signed_area(outline.points), 2),
            degenerate=degenerate,
        )
        self._stats.outlines_computed += 1
        if degenerate:
            self._stats.degenerate_count += 1

    def log_glyph_built(self, glyph_name: str, point_count: int) -> None:
        """Log a built glyph."""
        self._logger.debug("Glyph built", glyph=glyph_name, points=point_count)
        self._stats.glyphs_built += 1

    def log_error(self, context: str, error: Exception) -> None:
        """Log an error with its context."""
        self._logger.error(
            "Outline failed",
            context=context,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((context, str(error)))

    @property
    def stats(self) -> OutlineStats:
        """Get current outline statistics."""
        return self._stats
