# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Typegen Core Module"""

from .types import (
    DataType,
    ElementKind,
    ScalarKind,
    SCALAR_TOKENS,
    element_kind_for,
    scalar_kind_for,
    scalar_token,
)
from .tokens import TypeExpression
from .identifier import (
    Identifier,
    NUMERIC_NAME_PREFIX,
    make_identifier,
    format_tensor_name,
    is_numeric_name,
)
from .ty import (
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
)

__all__ = [
    "DataType",
    "ElementKind",
    "ScalarKind",
    "SCALAR_TOKENS",
    "element_kind_for",
    "scalar_kind_for",
    "scalar_token",
    "TypeExpression",
    "Identifier",
    "NUMERIC_NAME_PREFIX",
    "make_identifier",
    "format_tensor_name",
    "is_numeric_name",
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
]
