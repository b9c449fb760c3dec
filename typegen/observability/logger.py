# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Structured Logger for Typegen

Provides structured logging with text or JSON output for the command
line and for pipelines that embed the generator.

Example:
    from typegen.observability import TypegenLogger, Verbosity

    logger = TypegenLogger.get()
    logger.set_verbosity(Verbosity.DEBUG)
    logger.info("Rendered type", component="cli", descriptor="tensor")
"""

import json
import os
import sys
from dataclasses import dataclass, asdict, field
from datetime import datetime
from enum import IntEnum
from typing import Optional, TextIO


class Verbosity(IntEnum):
    """
    Logging verbosity levels.

    Uses IntEnum for numeric comparison (e.g., if verbosity >= INFO).
    """

    SILENT = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


@dataclass
class LogEntry:
    """
    Structured log entry.

    Attributes:
        level: Log level (ERROR, WARNING, INFO, DEBUG)
        message: Log message
        timestamp: ISO format timestamp
        component: Source component (core, cli)
        descriptor: Optional descriptor kind (tensor, scalar, shape, other)
        name: Optional name of the described value
        extra: Additional context fields
    """

    level: str
    message: str
    timestamp: str
    component: str = "typegen"
    descriptor: Optional[str] = None
    name: Optional[str] = None
    extra: dict = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str)

    def to_text(self) -> str:
        """Convert to human-readable text format."""
        parts = [
            f"[{self.level}]",
            f"[{self.component}]",
            self.message,
        ]
        if self.descriptor is not None:
            parts.append(f"({self.descriptor})")
        if self.name is not None:
            parts.append(f"name={self.name}")
        return " ".join(parts)


class TypegenLogger:
    """
    Structured logger for typegen.

    Singleton pattern ensures consistent logging configuration.
    """

    _instance: Optional["TypegenLogger"] = None

    def __init__(self):
        """Initialize logger with default settings."""
        self._verbosity = Verbosity.INFO
        self._output: Optional[TextIO] = None
        self._json_format = False
        self._handlers: list = []

        env_verbosity = os.environ.get("TYPEGEN_VERBOSITY")
        if env_verbosity is not None:
            try:
                self._verbosity = Verbosity(int(env_verbosity))
            except ValueError:
                self._verbosity = Verbosity.INFO

    @classmethod
    def get(cls) -> "TypegenLogger":
        """Get the singleton logger instance."""
        if cls._instance is None:
            cls._instance = TypegenLogger()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        cls._instance = None

    def set_verbosity(self, level: int) -> None:
        """
        Set verbosity level.

        Args:
            level: Verbosity level (0-4 or Verbosity enum)
        """
        if isinstance(level, Verbosity):
            self._verbosity = level
        else:
            self._verbosity = Verbosity(max(0, min(4, level)))

    def get_verbosity(self) -> Verbosity:
        """Get current verbosity level."""
        return self._verbosity

    def set_json_format(self, enabled: bool) -> None:
        """Enable or disable JSON output format."""
        self._json_format = enabled

    def set_output(self, output: Optional[TextIO]) -> None:
        """Set output stream. None writes to the current sys.stderr."""
        self._output = output

    def add_handler(self, handler) -> None:
        """Add a custom log handler."""
        self._handlers.append(handler)

    def _emit(self, entry: LogEntry) -> None:
        if self._json_format:
            line = entry.to_json()
        else:
            line = entry.to_text()

        output = self._output or sys.stderr
        output.write(line + "\n")
        output.flush()

        for handler in self._handlers:
            handler(entry)

    def _log(self, level: Verbosity, message: str, context: dict) -> None:
        if self._verbosity < level:
            return
        self._emit(
            LogEntry(
                level=level.name,
                message=message,
                timestamp=datetime.now().isoformat(),
                component=context.pop("component", "typegen"),
                descriptor=context.pop("descriptor", None),
                name=context.pop("name", None),
                extra=context,
            )
        )

    def debug(self, message: str, **context) -> None:
        """Log debug message."""
        self._log(Verbosity.DEBUG, message, context)

    def info(self, message: str, **context) -> None:
        """Log info message."""
        self._log(Verbosity.INFO, message, context)

    def warning(self, message: str, **context) -> None:
        """Log warning message."""
        self._log(Verbosity.WARNING, message, context)

    def error(self, message: str, **context) -> None:
        """Log error message."""
        self._log(Verbosity.ERROR, message, context)


def get_logger() -> TypegenLogger:
    """Get the global typegen logger."""
    return TypegenLogger.get()


def set_verbosity(level: int) -> None:
    """
    Set global verbosity level.

    Args:
        level: Verbosity level (0=SILENT, 1=ERROR, 2=WARNING, 3=INFO, 4=DEBUG)
    """
    TypegenLogger.get().set_verbosity(level)
