# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Typegen Core Types

Kind enumerations used by the descriptor model, plus the data type
vocabulary the model conversion stage uses to pick them.
"""

from enum import Enum, auto
from typing import Any, Union

import numpy as np

from ..errors import UnsupportedDataTypeError


class DataType(Enum):
    """Element data types found in imported models."""

    Float32 = auto()
    Float16 = auto()
    BFloat16 = auto()
    Float64 = auto()
    Int8 = auto()
    Int16 = auto()
    Int32 = auto()
    Int64 = auto()
    UInt8 = auto()
    Bool = auto()

    @classmethod
    def from_numpy(cls, dtype: Any) -> "DataType":
        """
        Convert a numpy dtype to DataType.

        Args:
            dtype: numpy dtype, scalar type, or dtype string.

        Raises:
            UnsupportedDataTypeError: If numpy has no matching data type.
        """
        try:
            np_dtype = np.dtype(dtype)
        except TypeError as err:
            raise UnsupportedDataTypeError(dtype, "DataType") from err

        mapping = {
            np.dtype("bool"): cls.Bool,
            np.dtype("uint8"): cls.UInt8,
            np.dtype("int8"): cls.Int8,
            np.dtype("int16"): cls.Int16,
            np.dtype("int32"): cls.Int32,
            np.dtype("int64"): cls.Int64,
            np.dtype("float16"): cls.Float16,
            np.dtype("float32"): cls.Float32,
            np.dtype("float64"): cls.Float64,
        }
        if np_dtype not in mapping:
            raise UnsupportedDataTypeError(
                np_dtype, "DataType", [str(d) for d in mapping]
            )
        return mapping[np_dtype]


class ElementKind(Enum):
    """Element kind of a tensor. Selects the rendered tensor form."""

    Int = auto()
    Float = auto()
    Bool = auto()


class ScalarKind(Enum):
    """Primitive scalar kinds."""

    Int32 = auto()
    Int64 = auto()
    Float32 = auto()
    Float64 = auto()
    Bool = auto()


# Primitive type token for each scalar kind
SCALAR_TOKENS: dict[ScalarKind, str] = {
    ScalarKind.Int32: "i32",
    ScalarKind.Int64: "i64",
    ScalarKind.Float32: "f32",
    ScalarKind.Float64: "f64",
    ScalarKind.Bool: "bool",
}

_ELEMENT_KINDS = {
    DataType.Float32: ElementKind.Float,
    DataType.Float16: ElementKind.Float,
    DataType.BFloat16: ElementKind.Float,
    DataType.Float64: ElementKind.Float,
    DataType.Int8: ElementKind.Int,
    DataType.Int16: ElementKind.Int,
    DataType.Int32: ElementKind.Int,
    DataType.Int64: ElementKind.Int,
    DataType.UInt8: ElementKind.Int,
    DataType.Bool: ElementKind.Bool,
}

_SCALAR_KINDS = {
    DataType.Int32: ScalarKind.Int32,
    DataType.Int64: ScalarKind.Int64,
    DataType.Float32: ScalarKind.Float32,
    DataType.Float64: ScalarKind.Float64,
    DataType.Bool: ScalarKind.Bool,
}


def _as_data_type(dtype: Union[DataType, Any]) -> DataType:
    if isinstance(dtype, DataType):
        return dtype
    return DataType.from_numpy(dtype)


def element_kind_for(dtype: Union[DataType, Any]) -> ElementKind:
    """
    Get the tensor element kind for a data type.

    Every floating point type maps to Float, every integer type to Int.

    Args:
        dtype: DataType or anything numpy.dtype() accepts.
    """
    return _ELEMENT_KINDS[_as_data_type(dtype)]


def scalar_kind_for(dtype: Union[DataType, Any]) -> ScalarKind:
    """
    Get the scalar kind for a data type.

    Args:
        dtype: DataType or anything numpy.dtype() accepts.

    Raises:
        UnsupportedDataTypeError: If the data type has no scalar kind
            (e.g. Float16 or UInt8).
    """
    data_type = _as_data_type(dtype)
    if data_type not in _SCALAR_KINDS:
        raise UnsupportedDataTypeError(
            data_type.name,
            "ScalarKind",
            [d.name for d in _SCALAR_KINDS],
        )
    return _SCALAR_KINDS[data_type]


def scalar_token(kind: ScalarKind) -> str:
    """Get the primitive type token for a scalar kind."""
    return SCALAR_TOKENS[kind]
