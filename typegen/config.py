# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Generator Configuration

Settings shared by the renderer and the command line.

Environment variables:
    TYPEGEN_BACKEND: Backend placeholder token (default "B")
    TYPEGEN_VERBOSITY: Logger verbosity 0-4 (default 3, INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .observability.logger import Verbosity

DEFAULT_BACKEND = "B"


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for type expression rendering.

    Attributes:
        backend: Generic placeholder token emitted in every tensor type.
            Copied verbatim, never interpreted.
        verbosity: Logger verbosity level.
    """

    backend: str = DEFAULT_BACKEND
    verbosity: Verbosity = Verbosity.INFO

    def __post_init__(self):
        if not isinstance(self.backend, str) or not self.backend.strip():
            raise ConfigurationError(
                "backend token must be a non-empty string",
                config_key="backend",
                config_value=self.backend,
            )
        try:
            verbosity = Verbosity(int(self.verbosity))
        except (TypeError, ValueError) as err:
            raise ConfigurationError(
                "verbosity must be an integer between 0 and 4",
                config_key="verbosity",
                config_value=self.verbosity,
            ) from err
        object.__setattr__(self, "verbosity", verbosity)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        backend = env.get("TYPEGEN_BACKEND", DEFAULT_BACKEND)

        verbosity = Verbosity.INFO
        raw_verbosity = env.get("TYPEGEN_VERBOSITY")
        if raw_verbosity is not None:
            try:
                verbosity = Verbosity(int(raw_verbosity))
            except ValueError as err:
                raise ConfigurationError(
                    "verbosity must be an integer between 0 and 4",
                    config_key="TYPEGEN_VERBOSITY",
                    config_value=raw_verbosity,
                ) from err

        return cls(backend=backend, verbosity=verbosity)


_default_config = GeneratorConfig()


def default_config() -> GeneratorConfig:
    """Get the default configuration."""
    return _default_config
