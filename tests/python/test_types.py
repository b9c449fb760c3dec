# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for data types and kind mapping

Validates:
- DataType conversion from numpy dtypes
- Element kind and scalar kind selection
- Scalar token table
"""

import numpy as np
import pytest

from typegen.core import (
    SCALAR_TOKENS,
    DataType,
    ElementKind,
    ScalarKind,
    element_kind_for,
    scalar_kind_for,
    scalar_token,
)
from typegen.errors import UnsupportedDataTypeError, ValidationError


class TestDataType:
    """Tests for DataType enum."""

    @pytest.mark.parametrize(
        "np_dtype,expected",
        [
            (np.float32, DataType.Float32),
            (np.float16, DataType.Float16),
            (np.float64, DataType.Float64),
            (np.int8, DataType.Int8),
            (np.int16, DataType.Int16),
            (np.int32, DataType.Int32),
            (np.int64, DataType.Int64),
            (np.uint8, DataType.UInt8),
            (np.bool_, DataType.Bool),
        ],
    )
    def test_from_numpy(self, np_dtype, expected):
        assert DataType.from_numpy(np_dtype) is expected

    def test_from_numpy_string(self):
        assert DataType.from_numpy("int64") is DataType.Int64

    def test_from_numpy_dtype_object(self):
        assert DataType.from_numpy(np.dtype("float32")) is DataType.Float32

    def test_from_numpy_unsupported(self):
        with pytest.raises(UnsupportedDataTypeError) as exc_info:
            DataType.from_numpy(np.complex64)
        assert "complex64" in str(exc_info.value)

    def test_from_numpy_unknown_name(self):
        with pytest.raises(UnsupportedDataTypeError):
            DataType.from_numpy("not_a_dtype")


class TestElementKind:
    """Tests for element kind selection."""

    @pytest.mark.parametrize(
        "dtype",
        [DataType.Float16, DataType.BFloat16, DataType.Float32, DataType.Float64],
    )
    def test_float_types(self, dtype):
        assert element_kind_for(dtype) is ElementKind.Float

    @pytest.mark.parametrize(
        "dtype",
        [DataType.Int8, DataType.Int16, DataType.Int32, DataType.Int64, DataType.UInt8],
    )
    def test_int_types(self, dtype):
        assert element_kind_for(dtype) is ElementKind.Int

    def test_bool(self):
        assert element_kind_for(DataType.Bool) is ElementKind.Bool

    def test_numpy_input(self):
        assert element_kind_for(np.int32) is ElementKind.Int
        assert element_kind_for("bool") is ElementKind.Bool


class TestScalarKind:
    """Tests for scalar kind selection."""

    @pytest.mark.parametrize(
        "dtype,expected",
        [
            (DataType.Int32, ScalarKind.Int32),
            (DataType.Int64, ScalarKind.Int64),
            (DataType.Float32, ScalarKind.Float32),
            (DataType.Float64, ScalarKind.Float64),
            (DataType.Bool, ScalarKind.Bool),
        ],
    )
    def test_supported(self, dtype, expected):
        assert scalar_kind_for(dtype) is expected

    def test_numpy_input(self):
        assert scalar_kind_for(np.float64) is ScalarKind.Float64

    @pytest.mark.parametrize(
        "dtype", [DataType.Float16, DataType.BFloat16, DataType.Int8, DataType.UInt8]
    )
    def test_unsupported(self, dtype):
        with pytest.raises(UnsupportedDataTypeError) as exc_info:
            scalar_kind_for(dtype)
        assert "ScalarKind" in str(exc_info.value)
        assert isinstance(exc_info.value, ValidationError)

    def test_token_table_covers_every_kind(self):
        assert set(SCALAR_TOKENS) == set(ScalarKind)

    def test_tokens(self):
        assert scalar_token(ScalarKind.Int32) == "i32"
        assert scalar_token(ScalarKind.Int64) == "i64"
        assert scalar_token(ScalarKind.Float32) == "f32"
        assert scalar_token(ScalarKind.Float64) == "f64"
        assert scalar_token(ScalarKind.Bool) == "bool"
