# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor model for gqltypes (descriptors, kinds, built-in scalars)."""

from gqltypes.model.kinds import (
    ABSTRACT_KINDS,
    CATEGORIES,
    COMPOSITE_KINDS,
    DESCRIPTOR_CLASSES,
    INPUT_KINDS,
    LEAF_KINDS,
    NAMED_KINDS,
    NULLABLE_KINDS,
    OUTPUT_KINDS,
    WRAPPING_KINDS,
    TypeKind,
    is_type,
    kind_of,
)
from gqltypes.model.scalars import BOOLEAN, BUILTIN_SCALARS, FLOAT, ID, INT, STRING
from gqltypes.model.types import (
    Argument,
    EnumType,
    FieldDefinition,
    InputField,
    InputObjectType,
    InterfaceType,
    ListType,
    NamedType,
    NamedTypeDescriptor,
    NonNullType,
    ObjectType,
    ParseError,
    ScalarType,
    TypeDescriptor,
    TypeRef,
    UnionType,
    WrappingType,
)

__all__ = [
    # Descriptors
    "ScalarType",
    "ObjectType",
    "InterfaceType",
    "UnionType",
    "EnumType",
    "InputObjectType",
    "ListType",
    "NonNullType",
    "FieldDefinition",
    "Argument",
    "InputField",
    "NamedType",
    "NamedTypeDescriptor",
    "WrappingType",
    "TypeDescriptor",
    "TypeRef",
    "ParseError",
    # Kinds
    "TypeKind",
    "DESCRIPTOR_CLASSES",
    "CATEGORIES",
    "INPUT_KINDS",
    "OUTPUT_KINDS",
    "LEAF_KINDS",
    "COMPOSITE_KINDS",
    "ABSTRACT_KINDS",
    "NULLABLE_KINDS",
    "NAMED_KINDS",
    "WRAPPING_KINDS",
    "kind_of",
    "is_type",
    # Built-in scalars
    "STRING",
    "INT",
    "FLOAT",
    "BOOLEAN",
    "ID",
    "BUILTIN_SCALARS",
]
