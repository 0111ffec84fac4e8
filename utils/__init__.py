# utils/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Utility module exports

from .logger import (
    LogLevel,
    EngineLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "EngineLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
