# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for typegen Observability Module

Validates:
- Verbosity enum
- LogEntry serialization
- TypegenLogger singleton
- Verbosity control functions
"""

import io
import json

from typegen.observability import (
    LogEntry,
    TypegenLogger,
    Verbosity,
    get_logger,
    set_verbosity,
)


class TestVerbosity:
    """Tests for Verbosity enum."""

    def test_verbosity_values(self):
        assert Verbosity.SILENT == 0
        assert Verbosity.ERROR == 1
        assert Verbosity.WARNING == 2
        assert Verbosity.INFO == 3
        assert Verbosity.DEBUG == 4

    def test_verbosity_comparison(self):
        assert Verbosity.DEBUG > Verbosity.INFO
        assert Verbosity.ERROR > Verbosity.SILENT


class TestLogEntry:
    """Tests for LogEntry dataclass."""

    def test_to_json(self):
        entry = LogEntry(
            level="INFO",
            message="Rendered",
            timestamp="2025-01-01T00:00:00",
            component="cli",
            descriptor="tensor",
        )
        data = json.loads(entry.to_json())
        assert data["level"] == "INFO"
        assert data["descriptor"] == "tensor"
        assert "name" not in data
        assert "extra" not in data

    def test_to_json_extra(self):
        entry = LogEntry(
            level="DEBUG",
            message="m",
            timestamp="t",
            extra={"tokens": 6},
        )
        assert json.loads(entry.to_json())["extra"] == {"tokens": 6}

    def test_to_text(self):
        entry = LogEntry(
            level="ERROR",
            message="Empty name",
            timestamp="t",
            component="cli",
            descriptor="shape",
            name="s",
        )
        assert entry.to_text() == "[ERROR] [cli] Empty name (shape) name=s"


class TestTypegenLogger:
    """Tests for TypegenLogger."""

    def test_singleton(self):
        assert TypegenLogger.get() is TypegenLogger.get()
        assert get_logger() is TypegenLogger.get()

    def test_default_verbosity(self):
        assert get_logger().get_verbosity() == Verbosity.INFO

    def test_env_verbosity(self, monkeypatch):
        monkeypatch.setenv("TYPEGEN_VERBOSITY", "4")
        TypegenLogger.reset()
        assert get_logger().get_verbosity() == Verbosity.DEBUG

    def test_env_verbosity_invalid(self, monkeypatch):
        monkeypatch.setenv("TYPEGEN_VERBOSITY", "loud")
        TypegenLogger.reset()
        assert get_logger().get_verbosity() == Verbosity.INFO

    def test_set_verbosity_clamps(self):
        set_verbosity(10)
        assert get_logger().get_verbosity() == Verbosity.DEBUG
        set_verbosity(-3)
        assert get_logger().get_verbosity() == Verbosity.SILENT

    def test_filtered_by_verbosity(self):
        output = io.StringIO()
        logger = get_logger()
        logger.set_output(output)
        logger.set_verbosity(Verbosity.WARNING)
        logger.info("hidden")
        logger.warning("shown")
        assert "hidden" not in output.getvalue()
        assert "[WARNING] [typegen] shown" in output.getvalue()

    def test_json_output(self):
        output = io.StringIO()
        logger = get_logger()
        logger.set_output(output)
        logger.set_json_format(True)
        logger.error("boom", component="core", name="x", rank=0)
        data = json.loads(output.getvalue())
        assert data["component"] == "core"
        assert data["name"] == "x"
        assert data["extra"] == {"rank": 0}

    def test_handler_called(self):
        entries = []
        logger = get_logger()
        logger.set_output(io.StringIO())
        logger.add_handler(entries.append)
        logger.info("hello", descriptor="scalar")
        assert len(entries) == 1
        assert entries[0].descriptor == "scalar"

    def test_default_output_is_stderr(self, capsys):
        get_logger().error("to stderr")
        assert "to stderr" in capsys.readouterr().err
