# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in scalar types available in every schema."""

from __future__ import annotations

import math
from typing import Any

from gqltypes.model.types import ParseError, ScalarType

# ###############
# Public Interface
# ###############

# Int is a signed 32-bit integer.
MAX_INT = 2**31 - 1
MIN_INT = -(2**31)


def parse_string(value: Any) -> str:
    """Accept only textual values."""
    if not isinstance(value, str):
        raise ParseError(f"String cannot represent a non-string value: {value!r}")
    return value


def parse_int(value: Any) -> int:
    """Accept integers within the signed 32-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Int cannot represent a non-integer value: {value!r}")
    if not MIN_INT <= value <= MAX_INT:
        raise ParseError(f"Int cannot represent a non 32-bit signed integer value: {value!r}")
    return value


def parse_float(value: Any) -> float:
    """Accept finite integers and floats."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Float cannot represent a non-numeric value: {value!r}")
    try:
        result = float(value)
    except OverflowError:
        raise ParseError(f"Float cannot represent a value this large: {value!r}") from None
    if not math.isfinite(result):
        raise ParseError(f"Float cannot represent a non-finite value: {value!r}")
    return result


def parse_boolean(value: Any) -> bool:
    """Accept only booleans."""
    if not isinstance(value, bool):
        raise ParseError(f"Boolean cannot represent a non-boolean value: {value!r}")
    return value


def parse_id(value: Any) -> str:
    """Accept strings and integers; integers are normalized to strings."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ParseError(f"ID cannot represent value: {value!r}")


STRING = ScalarType(
    name="String",
    description="UTF-8 character sequence.",
    parse=parse_string,
    serialize=str,
)

INT = ScalarType(
    name="Int",
    description="Signed 32-bit integer.",
    parse=parse_int,
    serialize=int,
)

FLOAT = ScalarType(
    name="Float",
    description="Signed double-precision floating-point value.",
    parse=parse_float,
    serialize=float,
)

BOOLEAN = ScalarType(
    name="Boolean",
    description="true or false.",
    parse=parse_boolean,
    serialize=bool,
)

ID = ScalarType(
    name="ID",
    description="Unique identifier, serialized as a string.",
    parse=parse_id,
    serialize=str,
)

BUILTIN_SCALARS: dict[str, ScalarType] = {scalar.name: scalar for scalar in (STRING, INT, FLOAT, BOOLEAN, ID)}
