# utils/logger.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FormulaLogger:
    """Centralized logger for the formula toolkit with structured output."""

    def __init__(self, name: str = "boole", level: LogLevel = LogLevel.WARNING):
        """Initialize the formula logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Diagnostics go to stderr so results on stdout stay clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(FormulaFormatter())

        self.logger.addHandler(console_handler)

        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Level shortcuts, so call sites read like the standard logger
    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Progress shown with -v: loaded formulas, created files."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Failures reported by the command line before it exits."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula processing events
    def formula_loaded(self, formula: str, variables: Iterable[str]):
        """Log a formula entering the pipeline."""
        names = "".join(variables) or "-"
        self.info(f"Formula: {formula} (variables: {names})")

    def stage_result(self, stage: str, formula: str):
        """Log the outcome of one rewriting stage."""
        self.debug(f"    {stage}: {formula}")

    def rows(self, title: str, rows: Iterable[object]):
        """Log a list of minimizer rows or implicants."""
        rendered = ", ".join(str(row) for row in rows)
        self.debug(f"    {title}: [{rendered}]")

    def petrick_step(self, description: str, terms: str):
        """Log one step of Petrick's method."""
        self.debug(f"      Petrick {description}: {terms}")


class FormulaFormatter(logging.Formatter):
    """Custom formatter with clean output for user-facing levels."""

    def format(self, record):
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


# Global logger instance
_global_logger: Optional[FormulaLogger] = None


def get_logger(name: str = "boole") -> FormulaLogger:
    """Get or create the global formula logger instance.

    Args:
        name: Logger name (default: "boole")

    Returns:
        FormulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FormulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
