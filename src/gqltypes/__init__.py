# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type classification and validation algebra for GraphQL-style schemas."""

from gqltypes.algebra import (
    field,
    has_fields,
    is_abstract_type,
    is_composite_type,
    is_input_type,
    is_leaf_type,
    is_named,
    is_non_null,
    is_nullable_type,
    is_object_type,
    is_output_type,
    is_valid_input,
    is_wrapped,
    named_type,
    nullable,
    resolve_type,
    unwrap,
)
from gqltypes.model import (
    Argument,
    EnumType,
    FieldDefinition,
    InputField,
    InputObjectType,
    InterfaceType,
    ListType,
    NonNullType,
    ObjectType,
    ParseError,
    ScalarType,
    TypeKind,
    UnionType,
    is_type,
    kind_of,
)
from gqltypes.schema import Schema, SchemaAssemblyError, SchemaLoadError, assemble, load_schema

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
    "ParseError",
    "TypeKind",
    "kind_of",
    "is_type",
    # Algebra
    "is_input_type",
    "is_output_type",
    "is_leaf_type",
    "is_composite_type",
    "is_abstract_type",
    "is_nullable_type",
    "is_non_null",
    "is_named",
    "is_wrapped",
    "is_object_type",
    "has_fields",
    "named_type",
    "nullable",
    "unwrap",
    "is_valid_input",
    "resolve_type",
    "field",
    # Schema
    "Schema",
    "SchemaAssemblyError",
    "SchemaLoadError",
    "assemble",
    "load_schema",
]
