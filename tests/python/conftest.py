# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for typegen Python tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import typegen
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

# Skip test modules that require optional dependencies not installed
collect_ignore = []

# Check for hypothesis
try:
    from hypothesis import HealthCheck, settings
except ImportError:
    collect_ignore.append("test_property_based.py")
else:
    # fresh_logger below is function scoped and autouse
    settings.register_profile(
        "typegen", suppress_health_check=[HealthCheck.function_scoped_fixture]
    )
    settings.load_profile("typegen")


@pytest.fixture(autouse=True)
def fresh_logger(monkeypatch):
    """Give every test its own logger singleton and a clean environment."""
    from typegen.observability import TypegenLogger

    monkeypatch.delenv("TYPEGEN_VERBOSITY", raising=False)
    monkeypatch.delenv("TYPEGEN_BACKEND", raising=False)
    TypegenLogger.reset()
    yield
    TypegenLogger.reset()
