# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Type Descriptors

Descriptors for the values a generated program holds, and their
rendering to target-language type expressions.

    Type = TensorType | ScalarType | ShapeType | OtherType

Every descriptor is validated when it is created, so rendering never
fails for a descriptor that exists.

Example:
    t = make_tensor_float("3", 2)
    type_name(t)      # "_3"
    str(render(t))    # "Tensor<B, 2>"

    s = make_shape("dims", 3)
    str(render(s))    # "[usize; 3]"
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar, Optional, Sequence, Union

from ..config import GeneratorConfig, default_config
from ..errors import ZeroRankTensorError, ValidationError, format_kind_error, format_rank_error
from .identifier import Identifier, format_tensor_name
from .tokens import TypeExpression
from .types import ElementKind, ScalarKind, scalar_token


class TypeKind(Enum):
    """Variant tag of a Type."""

    Tensor = auto()
    Scalar = auto()
    Shape = auto()
    Other = auto()


# Trailing kind token for each tensor element kind. Float is the default
# kind of the target Tensor type and is not spelled out.
_TENSOR_KIND_TOKENS: dict[ElementKind, Optional[str]] = {
    ElementKind.Float: None,
    ElementKind.Int: "Int",
    ElementKind.Bool: "Bool",
}


def _kind_label(kind: Any) -> str:
    return getattr(kind, "name", repr(kind))


def _check_rank(rank: Any, descriptor: str) -> int:
    if isinstance(rank, bool):
        raise format_rank_error(rank, descriptor)
    try:
        value = operator.index(rank)
    except TypeError as err:
        raise format_rank_error(rank, descriptor) from err
    if value < 0:
        raise format_rank_error(rank, descriptor)
    return value


def _check_kind(kind: Any, expected: type) -> None:
    if not isinstance(kind, expected):
        raise format_kind_error(kind, expected)


def _copy_shape(shape: Optional[Sequence[int]]) -> Optional[tuple[int, ...]]:
    if shape is None:
        return None
    if isinstance(shape, (str, bytes)):
        raise ValidationError(
            "shape must be a sequence of sizes",
            parameter="shape",
            expected="sequence of non-negative integers",
            received=repr(shape),
        )
    dims = []
    for dim in shape:
        try:
            if isinstance(dim, bool):
                raise TypeError("bool is not a size")
            value = operator.index(dim)
        except TypeError as err:
            raise ValidationError(
                f"shape entry {dim!r} is not an integer",
                parameter="shape",
                expected="sequence of non-negative integers",
                received=repr(list(shape)),
            ) from err
        if value < 0:
            raise ValidationError(
                f"shape entry {value} is negative",
                parameter="shape",
                expected="sequence of non-negative integers",
                received=repr(list(shape)),
            )
        dims.append(value)
    return tuple(dims)


@dataclass(frozen=True)
class TensorType:
    """
    Tensor of rank >= 1.

    Numeric names are escaped on construction ("7" becomes "_7") since
    tensors are often named after node indices in imported graphs.

    Attributes:
        name: Variable name in generated code.
        rank: Number of dimensions.
        kind: Element kind, selects the rendered form.
        shape: Optional static sizes. Advisory only, never rendered.
    """

    name: Identifier
    rank: int
    kind: ElementKind
    shape: Optional[tuple[int, ...]] = None

    type_kind: ClassVar[TypeKind] = TypeKind.Tensor

    def __post_init__(self):
        detail = f"of kind {_kind_label(self.kind)} with shape {self.shape}"
        ident = Identifier(self.name, "Tensor", detail)
        object.__setattr__(self, "name", Identifier(format_tensor_name(ident)))

        _check_kind(self.kind, ElementKind)
        shape = _copy_shape(self.shape)
        object.__setattr__(self, "shape", shape)

        rank = _check_rank(self.rank, "Tensor")
        if rank == 0:
            raise ZeroRankTensorError(str(self.name), _kind_label(self.kind), shape)
        object.__setattr__(self, "rank", rank)

    @classmethod
    def new(
        cls,
        name: str,
        rank: int,
        kind: ElementKind,
        shape: Optional[Sequence[int]] = None,
    ) -> "TensorType":
        """
        Create a tensor descriptor.

        Raises:
            EmptyNameError: If name is empty.
            ZeroRankTensorError: If rank is 0.
            ValidationError: If rank, kind or shape are malformed.
        """
        return cls(name=name, rank=rank, kind=kind, shape=shape)

    @classmethod
    def new_float(cls, name: str, rank: int) -> "TensorType":
        return cls.new_float_with_shape(name, rank, None)

    @classmethod
    def new_float_with_shape(
        cls, name: str, rank: int, shape: Optional[Sequence[int]]
    ) -> "TensorType":
        return cls.new(name, rank, ElementKind.Float, shape)

    @classmethod
    def new_int(cls, name: str, rank: int) -> "TensorType":
        return cls.new_int_with_shape(name, rank, None)

    @classmethod
    def new_int_with_shape(
        cls, name: str, rank: int, shape: Optional[Sequence[int]]
    ) -> "TensorType":
        return cls.new(name, rank, ElementKind.Int, shape)

    @classmethod
    def new_bool(cls, name: str, rank: int) -> "TensorType":
        return cls.new_bool_with_shape(name, rank, None)

    @classmethod
    def new_bool_with_shape(
        cls, name: str, rank: int, shape: Optional[Sequence[int]]
    ) -> "TensorType":
        return cls.new(name, rank, ElementKind.Bool, shape)

    def ty(self, config: Optional[GeneratorConfig] = None) -> TypeExpression:
        """Render as Tensor<B, rank> with a trailing Int or Bool kind."""
        backend = (config or default_config()).backend
        kind_token = _TENSOR_KIND_TOKENS[self.kind]
        if kind_token is None:
            return TypeExpression.of("Tensor", "<", backend, ",", self.rank, ">")
        return TypeExpression.of(
            "Tensor", "<", backend, ",", self.rank, ",", kind_token, ">"
        )


@dataclass(frozen=True)
class ScalarType:
    """Primitive scalar value."""

    name: Identifier
    kind: ScalarKind

    type_kind: ClassVar[TypeKind] = TypeKind.Scalar

    def __post_init__(self):
        object.__setattr__(
            self,
            "name",
            Identifier(self.name, "Scalar", f"of type {_kind_label(self.kind)}"),
        )
        _check_kind(self.kind, ScalarKind)

    @classmethod
    def new(cls, name: str, kind: ScalarKind) -> "ScalarType":
        return cls(name=name, kind=kind)

    def ty(self, config: Optional[GeneratorConfig] = None) -> TypeExpression:
        """Render as the primitive token for the scalar kind."""
        return TypeExpression.of(scalar_token(self.kind))


@dataclass(frozen=True)
class ShapeType:
    """Fixed-size array of `rank` unsigned sizes."""

    name: Identifier
    rank: int

    type_kind: ClassVar[TypeKind] = TypeKind.Shape

    def __post_init__(self):
        object.__setattr__(self, "name", Identifier(self.name, "Shape"))
        object.__setattr__(self, "rank", _check_rank(self.rank, "Shape"))

    @classmethod
    def new(cls, name: str, rank: int) -> "ShapeType":
        return cls(name=name, rank=rank)

    def ty(self, config: Optional[GeneratorConfig] = None) -> TypeExpression:
        """Render as [usize; rank]."""
        return TypeExpression.of("[", "usize", ";", self.rank, "]")


@dataclass(frozen=True)
class OtherType:
    """
    Escape hatch for any type not covered by the other descriptors.

    The expression is kept as supplied and rendered unchanged. Plain
    strings are wrapped with TypeExpression.raw().
    """

    name: Identifier
    expression: TypeExpression

    type_kind: ClassVar[TypeKind] = TypeKind.Other

    def __post_init__(self):
        object.__setattr__(
            self,
            "name",
            Identifier(self.name, "Other type", f"with expression {self.expression!r}"),
        )
        expression = self.expression
        if isinstance(expression, str):
            expression = TypeExpression.raw(expression)
        elif not isinstance(expression, TypeExpression):
            raise ValidationError(
                f"expression must be a TypeExpression or str, got {type(expression).__name__}",
                parameter="expression",
                expected="TypeExpression or str",
                received=repr(expression),
            )
        object.__setattr__(self, "expression", expression)

    @classmethod
    def new(cls, name: str, expression: Union[TypeExpression, str]) -> "OtherType":
        return cls(name=name, expression=expression)

    def ty(self, config: Optional[GeneratorConfig] = None) -> TypeExpression:
        return self.expression


Type = Union[TensorType, ScalarType, ShapeType, OtherType]

TYPE_CLASSES: tuple[type, ...] = (TensorType, ScalarType, ShapeType, OtherType)


def is_type(value: Any) -> bool:
    """Check whether a value is one of the Type descriptors."""
    return isinstance(value, TYPE_CLASSES)


def type_name(t: Type) -> Identifier:
    """Get the name of any descriptor."""
    if is_type(t):
        return t.name
    raise TypeError(f"Not a type descriptor: {type(t).__name__}")


def render(t: Type, config: Optional[GeneratorConfig] = None) -> TypeExpression:
    """
    Render a descriptor to its type expression.

    Args:
        t: Any Type descriptor.
        config: Rendering configuration. Defaults to default_config().

    Returns:
        TypeExpression for the descriptor.

    Raises:
        TypeError: If t is not a Type descriptor.
    """
    if isinstance(t, TensorType):
        return t.ty(config)
    if isinstance(t, ScalarType):
        return t.ty(config)
    if isinstance(t, ShapeType):
        return t.ty(config)
    if isinstance(t, OtherType):
        return t.ty(config)
    raise TypeError(f"Not a type descriptor: {type(t).__name__}")


def make_tensor(
    name: str,
    rank: int,
    kind: ElementKind,
    shape: Optional[Sequence[int]] = None,
) -> TensorType:
    """Create a tensor descriptor of any element kind."""
    return TensorType.new(name, rank, kind, shape)


def make_tensor_float(
    name: str, rank: int, shape: Optional[Sequence[int]] = None
) -> TensorType:
    return TensorType.new_float_with_shape(name, rank, shape)


def make_tensor_int(
    name: str, rank: int, shape: Optional[Sequence[int]] = None
) -> TensorType:
    return TensorType.new_int_with_shape(name, rank, shape)


def make_tensor_bool(
    name: str, rank: int, shape: Optional[Sequence[int]] = None
) -> TensorType:
    return TensorType.new_bool_with_shape(name, rank, shape)


def make_scalar(name: str, kind: ScalarKind) -> ScalarType:
    return ScalarType.new(name, kind)


def make_shape(name: str, rank: int) -> ShapeType:
    return ShapeType.new(name, rank)


def make_other(name: str, expression: Union[TypeExpression, str]) -> OtherType:
    """Create a descriptor for a caller-supplied type expression."""
    return OtherType.new(name, expression)
