# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification, unwrapping, input validation and type resolution."""

from gqltypes.algebra.predicates import (
    has_fields,
    is_abstract_type,
    is_composite_type,
    is_input_type,
    is_leaf_type,
    is_named,
    is_nullable_type,
    is_object_type,
    is_output_type,
)
from gqltypes.algebra.resolution import field, resolve_type
from gqltypes.algebra.validation import is_valid_input, parse_capability
from gqltypes.algebra.wrappers import is_non_null, is_wrapped, named_type, nullable, unwrap

__all__ = [
    "has_fields",
    "is_abstract_type",
    "is_composite_type",
    "is_input_type",
    "is_leaf_type",
    "is_named",
    "is_non_null",
    "is_nullable_type",
    "is_object_type",
    "is_output_type",
    "is_wrapped",
    "named_type",
    "nullable",
    "unwrap",
    "is_valid_input",
    "parse_capability",
    "resolve_type",
    "field",
]
