# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Operations over the list and non-null wrapper types.

``nullable`` and ``unwrap`` peel exactly one layer; ``named_type`` strips every
layer down to the underlying named type.
"""

from __future__ import annotations

from typing import Any

from gqltypes.model.kinds import NAMED_KINDS, WRAPPING_KINDS, TypeKind, kind_of
from gqltypes.model.types import NamedType

# ###############
# Public Interface
# ###############


def is_wrapped(type_: Any) -> bool:
    """Return True if *type_* is a list or non-null wrapper."""
    return kind_of(type_) in WRAPPING_KINDS


def is_non_null(type_: Any) -> bool:
    """Return True if *type_* is a non-null wrapper."""
    return kind_of(type_) is TypeKind.NON_NULL


def named_type(type_: Any) -> NamedType | None:
    """Return the named type underneath any number of wrappers.

    Returns None if *type_* is neither a named type nor a wrapper around one,
    including a wrapper whose innermost reference is an unresolved name.
    """
    while is_wrapped(type_):
        type_ = type_.of_type
    if kind_of(type_) in NAMED_KINDS:
        return type_
    return None


def nullable(type_: Any) -> Any:
    """Strip one non-null wrapper, or return *type_* unchanged."""
    if is_non_null(type_):
        return type_.of_type
    return type_


def unwrap(type_: Any) -> Any:
    """Strip one wrapper of either kind, or return *type_* unchanged."""
    if is_wrapped(type_):
        return type_.of_type
    return type_
