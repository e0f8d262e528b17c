# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Category predicates over type descriptors.

Every predicate is total: anything that is not a recognized descriptor,
including an unresolved type name, yields False. ``is_input_type``,
``is_output_type`` and ``is_leaf_type`` look through wrappers; the others test
the descriptor itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gqltypes.algebra.wrappers import named_type
from gqltypes.model.kinds import (
    ABSTRACT_KINDS,
    COMPOSITE_KINDS,
    INPUT_KINDS,
    LEAF_KINDS,
    NAMED_KINDS,
    NULLABLE_KINDS,
    OUTPUT_KINDS,
    TypeKind,
    kind_of,
)

# ###############
# Public Interface
# ###############


def is_input_type(type_: Any) -> bool:
    """Return True if *type_* may be used for arguments and input object fields."""
    return kind_of(named_type(type_)) in INPUT_KINDS


def is_output_type(type_: Any) -> bool:
    """Return True if *type_* may be used as the result of a field."""
    return kind_of(named_type(type_)) in OUTPUT_KINDS


def is_leaf_type(type_: Any) -> bool:
    """Return True if *type_* needs no sub-selection (scalars and enums)."""
    return kind_of(named_type(type_)) in LEAF_KINDS


def is_composite_type(type_: Any) -> bool:
    """Return True if *type_* may be the parent of a selection set."""
    return kind_of(type_) in COMPOSITE_KINDS


def is_abstract_type(type_: Any) -> bool:
    """Return True if *type_* is an interface or a union."""
    return kind_of(type_) in ABSTRACT_KINDS


def is_nullable_type(type_: Any) -> bool:
    """Return True if *type_* accepts null directly (anything but non-null)."""
    return kind_of(type_) in NULLABLE_KINDS


def is_named(type_: Any) -> bool:
    return kind_of(type_) in NAMED_KINDS


def is_object_type(type_: Any) -> bool:
    return kind_of(type_) is TypeKind.OBJECT


def has_fields(type_: Any) -> bool:
    """Return True if *type_* exposes a field mapping.

    This is a structural check, so it matches object, interface and input
    object types alike.
    """
    return isinstance(getattr(type_, "fields", None), Mapping)
