# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Typegen: Type Descriptors for Model Code Generation

Describes the tensors, scalars, shapes and other values of a generated
program and renders them to target-language type expressions.

Example:
    import typegen

    t = typegen.make_tensor_int("x", 4, shape=[1, 2, 3, 4])
    print(typegen.type_name(t), str(typegen.render(t)))
    # x Tensor<B, 4, Int>
"""

__version__ = "0.1.0"
__author__ = "Wahyu Ardiansyah"

from .core import (
    DataType,
    ElementKind,
    ScalarKind,
    TypeExpression,
    Identifier,
    make_identifier,
    format_tensor_name,
    TypeKind,
    TensorType,
    ScalarType,
    ShapeType,
    OtherType,
    Type,
    is_type,
    type_name,
    render,
    make_tensor,
    make_tensor_float,
    make_tensor_int,
    make_tensor_bool,
    make_scalar,
    make_shape,
    make_other,
    element_kind_for,
    scalar_kind_for,
)

# Configuration
from .config import GeneratorConfig, default_config

# Observability
from .observability import set_verbosity, Verbosity

# Errors
from .errors import (
    TypegenError,
    ValidationError,
    EmptyNameError,
    ZeroRankTensorError,
    UnsupportedDataTypeError,
    ConfigurationError,
)

__all__ = [
    # Core types
    "DataType",
    "ElementKind",
    "ScalarKind",
    "TypeExpression",
    "Identifier",
    "make_identifier",
    "format_tensor_name",
    "TypeKind",
    "TensorType",
    "ScalarType",
    "ShapeType",
    "OtherType",
    "Type",
    "is_type",
    "type_name",
    "render",
    "make_tensor",
    "make_tensor_float",
    "make_tensor_int",
    "make_tensor_bool",
    "make_scalar",
    "make_shape",
    "make_other",
    "element_kind_for",
    "scalar_kind_for",
    # Configuration
    "GeneratorConfig",
    "default_config",
    # Observability
    "set_verbosity",
    "Verbosity",
    # Errors
    "TypegenError",
    "ValidationError",
    "EmptyNameError",
    "ZeroRankTensorError",
    "UnsupportedDataTypeError",
    "ConfigurationError",
    # Version
    "__version__",
    "__author__",
]
