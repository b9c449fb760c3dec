# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Typegen Error Hierarchy

Provides error types for descriptor construction with:
- Clear error categorization
- Helpful error messages with suggestions
- Context information for debugging the upstream caller

Error Categories:
- TypegenError: Base class for all typegen errors
- ValidationError: Invalid constructor arguments
- EmptyNameError: Descriptor created with an empty name
- ZeroRankTensorError: Tensor descriptor created with rank 0
- UnsupportedDataTypeError: Data type has no matching kind
- ConfigurationError: Invalid generator configuration

Construction errors signal a defect in the calling pipeline. They are
raised before an invalid descriptor can exist and are not meant to be
retried.
"""

from typing import Any, Optional


class TypegenError(Exception):
    """
    Base class for all typegen errors.

    Attributes:
        message: Human-readable error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


class ValidationError(TypegenError):
    """
    Constructor argument validation error.

    Raised when:
    - A rank is negative or not an integer
    - A shape entry is not a non-negative integer
    - A kind is not a member of the expected enum
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.parameter = parameter
        context = {}
        if parameter:
            context["parameter"] = parameter
        if expected:
            context["expected"] = expected
        if received:
            context["received"] = received

        default_suggestions = [
            "Check the value produced by the model conversion stage",
        ]

        super().__init__(
            message=f"Validation failed: {message}",
            suggestions=suggestions or default_suggestions,
            context=context,
        )


class EmptyNameError(ValidationError):
    """
    A descriptor was constructed with an empty name.

    The message identifies the descriptor kind and, where available,
    the metadata it was created with.
    """

    def __init__(self, descriptor: str, detail: Optional[str] = None):
        self.descriptor = descriptor
        self.detail = detail

        message = f"{descriptor} was passed with empty name"
        if detail:
            message = f"{descriptor} {detail} was passed with empty name"

        super().__init__(
            message=message,
            parameter="name",
            expected="non-empty identifier",
            received="''",
            suggestions=[
                "Assign a name to every value before generating code",
            ],
        )


class ZeroRankTensorError(ValidationError):
    """Tensor descriptor requested with rank 0."""

    def __init__(self, name: str, kind: Any = None, shape: Any = None):
        self.name = name
        self.kind = kind
        self.shape = shape

        suggestions = [
            "Create a ScalarType instead of a zero-rank TensorType",
        ]

        super().__init__(
            message=(
                f"Trying to create TensorType '{name}' of kind {kind} "
                f"with shape {shape} and rank = 0 - should be a Scalar instead!"
            ),
            parameter="rank",
            expected=">= 1",
            received="0",
            suggestions=suggestions,
        )


class UnsupportedDataTypeError(ValidationError):
    """Data type that cannot be mapped to a descriptor kind."""

    def __init__(self, dtype: Any, target: str, supported: Optional[list[str]] = None):
        self.dtype = dtype
        self.target = target
        self.supported = supported or []

        suggestions = []
        if self.supported:
            suggestions.append(f"Use one of: {', '.join(self.supported)}")
        suggestions.append("Cast the value in the source model first")

        super().__init__(
            message=f"Data type {dtype} cannot be represented as {target}",
            parameter="dtype",
            expected=", ".join(self.supported) if self.supported else None,
            received=str(dtype),
            suggestions=suggestions,
        )


class ConfigurationError(TypegenError):
    """
    Configuration error.

    Raised when:
    - An environment variable holds an invalid value
    - A configuration field is out of range
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = str(config_value)

        suggestions = [
            "Check configuration parameters",
            "Unset the environment variable to use the default",
        ]

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=suggestions,
            context=context,
        )


def format_rank_error(
    rank: Any,
    descriptor: str,
) -> ValidationError:
    """Create a ValidationError for a rank that is not a non-negative integer."""
    return ValidationError(
        message=f"{descriptor} rank must be a non-negative integer, got {rank!r}",
        parameter="rank",
        expected="non-negative integer",
        received=repr(rank),
    )


def format_kind_error(
    kind: Any,
    expected: type,
) -> ValidationError:
    """Create a ValidationError for a kind outside the expected enum."""
    members = ", ".join(member.name for member in expected)
    return ValidationError(
        message=f"Expected a {expected.__name__}, got {kind!r}",
        parameter="kind",
        expected=members,
        received=repr(kind),
    )
