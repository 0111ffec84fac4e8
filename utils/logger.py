# utils/logger.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Logging utility for the truth table engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for the truth table engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class EngineLogger:
    """Centralized logger for the engine with structured pipeline output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the engine logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(EngineFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for pipeline stages
    def formula_normalized(self, source: str, canonical: str, direction: str):
        """Log the outcome of a notation conversion."""
        self.debug(f"Normalized ({direction}): '{source}' -> '{canonical}'")

    def variables_extracted(self, canonical: str, variables: Sequence[str]):
        """Log the variable set found in a canonical formula."""
        shown = ", ".join(variables) if variables else "none"
        self.debug(f"Variables in '{canonical}': [{shown}]")

    def postfix_compiled(self, canonical: str, postfix: str):
        """Log infix to postfix compilation."""
        self.debug(f"Compiled '{canonical}' to postfix: {postfix}")

    def row_evaluated(self, index: int, inputs: Sequence[bool], output: bool):
        """Log a single truth table row."""
        cells = " ".join("T" if value else "F" for value in inputs)
        self.debug(f"    row {index}: {cells} -> {'T' if output else 'F'}")

    def table_built(self, formula: str, variable_count: int, row_count: int):
        """Log completion of a truth table."""
        self.debug(
            f"Truth table for '{formula}' built: "
            f"{variable_count} variables, {row_count} rows"
        )

    def table_rejected(self, formula: str, reason: str):
        """Log a formula that could not be tabulated."""
        self.debug(f"Truth table for '{formula}' rejected: {reason}")


class EngineFormatter(logging.Formatter):
    """Custom formatter with clean output for non-debug records."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO and record.levelno < logging.WARNING:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[EngineLogger] = None


def get_logger(name: str = "tabula") -> EngineLogger:
    """Get or create the global engine logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        EngineLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger(name)
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
