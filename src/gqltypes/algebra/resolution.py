# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime resolution of abstract types and field lookup by name."""

from __future__ import annotations

from typing import Any

from gqltypes.algebra.predicates import has_fields
from gqltypes.model.kinds import ABSTRACT_KINDS, kind_of
from gqltypes.model.types import FieldDefinition, InputField

# ###############
# Public Interface
# ###############


def resolve_type(type_: Any, value: Any) -> Any:
    """Return the concrete type representing *value*.

    Interfaces and unions with a ``resolve_type`` capability delegate to it.
    Any other type, including an abstract type without a resolver, is
    returned unchanged. Errors raised by the capability propagate.
    """
    if kind_of(type_) in ABSTRACT_KINDS and type_.resolve_type is not None:
        return type_.resolve_type(value)
    return type_


def field(type_: Any, name: str) -> FieldDefinition | InputField | None:
    """Return the field of *type_* registered under exactly *name*, or None.

    Types without fields yield None as well.
    """
    if not has_fields(type_):
        return None
    return type_.fields.get(name)
