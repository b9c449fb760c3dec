# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Type Expressions

A TypeExpression is the rendered form of a descriptor: an immutable
sequence of target-language tokens that the code emitter splices into
generated source.

Example:
    expr = TypeExpression.of("Tensor", "<", "B", ",", 2, ">")
    str(expr)     # "Tensor<B, 2>"
    expr.tokens   # ("Tensor", "<", "B", ",", "2", ">")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

# Punctuation printed without a leading space
_NO_SPACE_BEFORE = frozenset({"<", ">", ",", ";", "]", ")", "::"})
# Punctuation printed without a trailing space
_NO_SPACE_AFTER = frozenset({"<", "[", "(", "::", "&"})

Token = Union[str, int]


@dataclass(frozen=True)
class TypeExpression:
    """
    Immutable token sequence denoting a type.

    Attributes:
        tokens: Tokens in source order. Integers are stored as their
            literal text.
        verbatim: True for expressions supplied as raw text by the caller.
            Verbatim expressions hold a single token that is printed
            unchanged.
    """

    tokens: tuple[str, ...] = ()
    verbatim: bool = False

    def __post_init__(self):
        if isinstance(self.tokens, (str, bytes)):
            raise TypeError("tokens must be a sequence of tokens, not a single string")
        tokens = tuple(self.tokens)
        if self.verbatim:
            # A verbatim expression is exactly one str, which may be empty
            if len(tokens) != 1 or not isinstance(tokens[0], str):
                raise TypeError(
                    f"Verbatim expression needs exactly one str token, got {tokens!r}"
                )
        else:
            tokens = tuple(_literal(token) for token in tokens)
        object.__setattr__(self, "tokens", tokens)

    @classmethod
    def of(cls, *tokens: Token) -> "TypeExpression":
        """Build an expression from tokens. Integers become literal tokens."""
        return cls(tokens=tokens)

    @classmethod
    def raw(cls, text: str) -> "TypeExpression":
        """Wrap caller-supplied text without parsing it."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return cls(tokens=(text,), verbatim=True)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        if self.verbatim:
            return self.tokens[0]

        parts: list[str] = []
        previous = None
        for token in self.tokens:
            if (
                previous is not None
                and token not in _NO_SPACE_BEFORE
                and previous not in _NO_SPACE_AFTER
            ):
                parts.append(" ")
            parts.append(token)
            previous = token
        return "".join(parts)

    def __repr__(self) -> str:
        return f"TypeExpression({str(self)!r})"


def _literal(token: Token) -> str:
    # bool is an int subclass but has no literal form here
    if isinstance(token, bool):
        raise TypeError("bool is not a valid token")
    if isinstance(token, int):
        if token < 0:
            raise ValueError(f"Negative literal {token} is not a valid size token")
        return str(token)
    if not isinstance(token, str) or not token:
        raise TypeError(f"Invalid token: {token!r}")
    return token
