# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Identifiers for generated code.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import EmptyNameError

logger = logging.getLogger("typegen.core.identifier")

# Prefix for names that would otherwise be a bare number
NUMERIC_NAME_PREFIX = "_"


class Identifier(str):
    """
    Validated, non-empty variable name.

    Behaves as the plain string it wraps, so it can be compared with and
    formatted like any other str.
    """

    __slots__ = ()

    def __new__(cls, raw: str, descriptor: str = "Identifier", detail: Optional[str] = None):
        if not isinstance(raw, str):
            raise TypeError(f"{descriptor} name must be a str, got {type(raw).__name__}")
        if not raw:
            raise EmptyNameError(descriptor, detail)
        return super().__new__(cls, raw)

    def __repr__(self) -> str:
        return f"Identifier({str.__repr__(self)})"


def make_identifier(
    raw: str,
    descriptor: str = "Identifier",
    detail: Optional[str] = None,
) -> Identifier:
    """
    Create an Identifier from a raw name.

    Args:
        raw: Name as supplied by the conversion stage.
        descriptor: Kind of value being named, used in the error message.
        detail: Extra metadata for the error message (kind, shape, ...).

    Raises:
        EmptyNameError: If raw is empty.
    """
    return Identifier(raw, descriptor, detail)


def is_numeric_name(raw: str) -> bool:
    """Check whether a name consists only of ASCII decimal digits."""
    return bool(raw) and all("0" <= ch <= "9" for ch in raw)


def format_tensor_name(raw: str) -> str:
    """
    Escape a tensor name that is a bare number.

    Imported graphs often name tensors by node index ("7", "42"), which
    is not a legal variable name. Such names get NUMERIC_NAME_PREFIX;
    everything else is returned unchanged.
    """
    if is_numeric_name(raw):
        escaped = NUMERIC_NAME_PREFIX + raw
        logger.debug("Escaped numeric tensor name %r as %r", raw, escaped)
        return escaped
    return raw
