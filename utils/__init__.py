# utils/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    FormulaLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "FormulaLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
