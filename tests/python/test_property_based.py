"""
Property-based tests using Hypothesis.

Checks naming and rendering guarantees across generated names and ranks.

These tests require:
    - hypothesis library: pip install hypothesis
"""

import pytest
from hypothesis import given, settings, strategies as st

from typegen.core import (
    ScalarKind,
    SCALAR_TOKENS,
    TypeExpression,
    make_other,
    make_scalar,
    make_shape,
    make_tensor_bool,
    make_tensor_float,
    make_tensor_int,
    render,
    type_name,
)
from typegen.errors import EmptyNameError

numeric_names = st.text(alphabet="0123456789", min_size=1, max_size=12)
identifier_names = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,15}", fullmatch=True)
ranks = st.integers(min_value=1, max_value=16)

TENSOR_CASES = [
    (make_tensor_float, "Tensor<B, {}>"),
    (make_tensor_int, "Tensor<B, {}, Int>"),
    (make_tensor_bool, "Tensor<B, {}, Bool>"),
]


class TestTensorProperties:
    """Tensor constructors over generated inputs."""

    @pytest.mark.parametrize("make,template", TENSOR_CASES)
    @given(name=identifier_names, rank=ranks)
    @settings(max_examples=50)
    def test_render_matches_table(self, make, template, name, rank):
        t = make(name, rank)
        assert type_name(t) == name
        assert str(render(t)) == template.format(rank)

    @given(name=numeric_names, rank=ranks)
    @settings(max_examples=50)
    def test_numeric_names_escaped(self, name, rank):
        assert type_name(make_tensor_float(name, rank)) == "_" + name

    @given(
        shape=st.lists(st.integers(min_value=0, max_value=1024), min_size=1, max_size=6)
    )
    @settings(max_examples=50)
    def test_shape_never_rendered(self, shape):
        rank = len(shape)
        assert render(make_tensor_int("x", rank, shape=shape)) == render(
            make_tensor_int("x", rank)
        )


class TestOtherKindProperties:
    """Scalar, Shape and Other descriptors over generated inputs."""

    @given(name=numeric_names)
    @settings(max_examples=30)
    def test_numeric_names_kept(self, name):
        assert type_name(make_scalar(name, ScalarKind.Int32)) == name
        assert type_name(make_shape(name, 2)) == name
        assert type_name(make_other(name, "u8")) == name

    @given(name=identifier_names, kind=st.sampled_from(list(ScalarKind)))
    @settings(max_examples=50)
    def test_scalar_depends_on_kind_only(self, name, kind):
        assert str(render(make_scalar(name, kind))) == SCALAR_TOKENS[kind]

    @given(name=identifier_names, rank=ranks)
    @settings(max_examples=50)
    def test_shape_render(self, name, rank):
        assert str(render(make_shape(name, rank))) == f"[usize; {rank}]"

    @given(expression=st.text(max_size=40))
    @settings(max_examples=50)
    def test_other_passthrough(self, expression):
        assert str(render(make_other("t", expression))) == expression
        expr = TypeExpression.raw(expression)
        assert render(make_other("t", expr)) is expr

    @given(make=st.sampled_from([make_tensor_float, make_tensor_int, make_tensor_bool]))
    def test_empty_tensor_name_rejected(self, make):
        with pytest.raises(EmptyNameError):
            make("", 1)
