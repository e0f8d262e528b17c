# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema assembly and YAML schema documents."""

from gqltypes.schema.assembly import (
    Schema,
    SchemaAssemblyError,
    SchemaIssue,
    assemble,
    check_types,
    display,
)
from gqltypes.schema.loader import SchemaLoadError, load_schema, load_schema_text

__all__ = [
    "Schema",
    "SchemaAssemblyError",
    "SchemaIssue",
    "SchemaLoadError",
    "assemble",
    "check_types",
    "display",
    "load_schema",
    "load_schema_text",
]
