# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of type kinds and the semantic categories each kind belongs to.

The category sets are closed: a new descriptor variant must be added to
:class:`TypeKind`, to ``DESCRIPTOR_CLASSES`` and to every category it belongs
to.
"""

from __future__ import annotations

from enum import Enum

from gqltypes.model.types import (
    EnumType,
    InputObjectType,
    InterfaceType,
    ListType,
    NonNullType,
    ObjectType,
    ScalarType,
    UnionType,
)

# ###############
# Public Interface
# ###############


class TypeKind(Enum):
    """The eight closed variants of a type descriptor.

    Values match the ``kind`` discriminator of the descriptor models.
    """

    SCALAR = "scalar"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    ENUM = "enum"
    INPUT_OBJECT = "input_object"
    LIST = "list"
    NON_NULL = "non_null"


DESCRIPTOR_CLASSES: dict[TypeKind, type] = {
    TypeKind.SCALAR: ScalarType,
    TypeKind.OBJECT: ObjectType,
    TypeKind.INTERFACE: InterfaceType,
    TypeKind.UNION: UnionType,
    TypeKind.ENUM: EnumType,
    TypeKind.INPUT_OBJECT: InputObjectType,
    TypeKind.LIST: ListType,
    TypeKind.NON_NULL: NonNullType,
}

# Types usable as arguments and input object fields.
INPUT_KINDS = frozenset(
    {TypeKind.SCALAR, TypeKind.ENUM, TypeKind.INPUT_OBJECT, TypeKind.LIST, TypeKind.NON_NULL}
)

# Types usable as the result of a field.
OUTPUT_KINDS = frozenset(
    {TypeKind.SCALAR, TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION, TypeKind.ENUM}
)

# Types with no sub-selection.
LEAF_KINDS = frozenset({TypeKind.SCALAR, TypeKind.ENUM})

# Types that may be the parent of a selection set.
COMPOSITE_KINDS = frozenset({TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION})

# Types resolved to a concrete object type at runtime.
ABSTRACT_KINDS = frozenset({TypeKind.INTERFACE, TypeKind.UNION})

NULLABLE_KINDS = frozenset(kind for kind in TypeKind if kind is not TypeKind.NON_NULL)

NAMED_KINDS = frozenset(
    {
        TypeKind.SCALAR,
        TypeKind.OBJECT,
        TypeKind.INTERFACE,
        TypeKind.UNION,
        TypeKind.ENUM,
        TypeKind.INPUT_OBJECT,
    }
)

WRAPPING_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})

CATEGORIES: dict[str, frozenset[TypeKind]] = {
    "input": INPUT_KINDS,
    "output": OUTPUT_KINDS,
    "leaf": LEAF_KINDS,
    "composite": COMPOSITE_KINDS,
    "abstract": ABSTRACT_KINDS,
    "nullable": NULLABLE_KINDS,
    "named": NAMED_KINDS,
    "wrapping": WRAPPING_KINDS,
}


def kind_of(term: object) -> TypeKind | None:
    """Return the kind of a type descriptor, or None if *term* is not one."""
    if isinstance(term, _DESCRIPTOR_TYPES):
        return TypeKind(term.kind)
    return None


def is_type(term: object) -> bool:
    """Return True if *term* is a recognized type descriptor."""
    return kind_of(term) is not None


# ################
# Implementation
# ################

_DESCRIPTOR_TYPES = tuple(DESCRIPTOR_CLASSES.values())
