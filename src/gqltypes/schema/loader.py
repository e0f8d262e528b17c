# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading schemas from YAML documents.

A schema document is a mapping with a ``types`` list. Each entry has the shape
of a named type descriptor, selected by its ``kind``::

    types:
      - kind: object
        name: FieldTrip
        fields:
          id:
            type: {kind: non_null, of_type: ID}
          name:
            type: String
      - kind: enum
        name: Color
        values: {RED: 1, GREEN: 2}

Capabilities (parse functions and type resolvers) cannot be written in YAML and
are supplied by the caller when loading.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

from gqltypes.algebra.predicates import is_abstract_type
from gqltypes.model.kinds import TypeKind, kind_of
from gqltypes.model.types import NamedType, NamedTypeDescriptor, ScalarType, TypeRef
from gqltypes.schema.assembly import Schema, SchemaAssemblyError, assemble

# ###############
# Public Interface
# ###############


class SchemaLoadError(Exception):
    """Raised when a schema document cannot be read or does not form a valid schema."""


def load_schema(
    path: Path,
    *,
    scalars: Iterable[ScalarType] = (),
    resolvers: Mapping[str, Callable[[Any], TypeRef]] | None = None,
    include_builtins: bool = True,
) -> Schema:
    """Load and assemble a schema from a YAML document.

    Args:
        path: Path to the schema document.
        scalars: Scalar descriptors (typically carrying parse capabilities) that
            replace document scalars of the same name or add new ones.
        resolvers: Mapping from interface or union name to its resolve-type
            capability.
        include_builtins: Add the built-in scalars for undefined names.

    Returns:
        The assembled :class:`Schema`.

    Raises:
        SchemaLoadError: If the file cannot be read, the YAML is invalid, the
            document does not describe valid types, or assembly fails.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SchemaLoadError(f"Schema document not found: {path}") from None
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema document: {exc}") from exc

    return load_schema_text(
        text,
        scalars=scalars,
        resolvers=resolvers,
        include_builtins=include_builtins,
        source_label=str(path),
    )


def load_schema_text(
    text: str,
    *,
    scalars: Iterable[ScalarType] = (),
    resolvers: Mapping[str, Callable[[Any], TypeRef]] | None = None,
    include_builtins: bool = True,
    source_label: str = "<string>",
) -> Schema:
    """Load and assemble a schema from YAML text.

    See :func:`load_schema` for the arguments. *source_label* names the
    document in error messages.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaLoadError(f"{source_label}: schema document must be a YAML mapping")

    try:
        document = _SchemaDocument.model_validate(data)
    except ValidationError as exc:
        raise SchemaLoadError(f"Invalid schema document {source_label}: {exc}") from exc

    types = _attach_capabilities(document.types, list(scalars), resolvers or {}, source_label)

    try:
        return assemble(types, include_builtins=include_builtins)
    except SchemaAssemblyError as exc:
        raise SchemaLoadError(f"{source_label}: invalid schema:\n{exc}") from exc


# ################
# Implementation
# ################


class _SchemaDocument(BaseModel):
    """Top-level shape of a YAML schema document."""

    model_config = ConfigDict(extra="forbid")

    types: list[NamedTypeDescriptor] = _Field(default_factory=list)


def _attach_capabilities(
    types: list[NamedType],
    scalars: list[ScalarType],
    resolvers: Mapping[str, Callable[[Any], TypeRef]],
    source_label: str,
) -> list[NamedType]:
    """Swap in caller-supplied scalars and attach resolvers to abstract types."""
    scalar_overrides = {scalar.name: scalar for scalar in scalars}
    declared = {type_.name: type_ for type_ in types}

    for name in resolvers:
        target = declared.get(name)
        if target is None:
            raise SchemaLoadError(f"{source_label}: resolver given for unknown type '{name}'")
        if not is_abstract_type(target):
            raise SchemaLoadError(
                f"{source_label}: resolver given for '{name}', which is not an interface or union"
            )

    result: list[NamedType] = []
    for type_ in types:
        override = scalar_overrides.pop(type_.name, None)
        if override is not None:
            if kind_of(type_) is not TypeKind.SCALAR:
                raise SchemaLoadError(f"{source_label}: scalar '{type_.name}' conflicts with a declared {type_.kind}")
            type_ = override
        if type_.name in resolvers:
            type_ = type_.model_copy(update={"resolve_type": resolvers[type_.name]})
        result.append(type_)

    # Scalars that the document does not declare are added as-is.
    result.extend(scalar_overrides.values())
    return result
