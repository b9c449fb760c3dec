# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Typegen Observability Module

Provides structured logging for the typegen command line and for
pipelines embedding the generator.
"""

from .logger import (
    Verbosity,
    LogEntry,
    TypegenLogger,
    get_logger,
    set_verbosity,
)

__all__ = [
    "Verbosity",
    "LogEntry",
    "TypegenLogger",
    "get_logger",
    "set_verbosity",
]
