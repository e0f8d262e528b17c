# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema assembly: collecting named types and checking their references.

Assembly gathers every named type reachable from the supplied definitions,
fills in the built-in scalars, and checks structural rules the type algebra
relies on but never verifies itself:

- type names are unique;
- every referenced type name is defined;
- union members are object types;
- object and interface fields have output types;
- arguments and input object fields have input types.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from gqltypes.algebra.predicates import is_input_type, is_object_type, is_output_type
from gqltypes.algebra.resolution import field as lookup_field
from gqltypes.algebra.resolution import resolve_type as resolve_abstract_type
from gqltypes.algebra.validation import is_valid_input
from gqltypes.model.kinds import NAMED_KINDS, WRAPPING_KINDS, TypeKind, kind_of
from gqltypes.model.scalars import BUILTIN_SCALARS
from gqltypes.model.types import FieldDefinition, InputField, NamedType, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SchemaIssue:
    """A structural problem detected during schema assembly.

    Attributes:
        message: Human-readable description of the problem.
    """

    message: str


class SchemaAssemblyError(Exception):
    """Raised when a set of type definitions cannot form a valid schema."""

    def __init__(self, issues: list[SchemaIssue]) -> None:
        self.issues = issues
        super().__init__("\n".join(issue.message for issue in issues))


@dataclass(frozen=True, eq=False)
class Schema:
    """An assembled set of named types, addressable by name.

    Schemas compare and hash by identity.

    Attributes:
        types: Mapping from type name to its named descriptor.
    """

    types: dict[str, NamedType]

    def lookup(self, name: str) -> NamedType | None:
        """Return the named type called *name*, or None."""
        return self.types.get(name)

    def resolve(self, ref: Any) -> Any:
        """Replace every type name inside *ref* with its definition.

        Wrappers are rebuilt around the resolved inner type. Returns None if
        *ref* mentions an unknown name or is not a type reference.
        """
        return _resolve_ref(ref, self.types)

    def resolve_type(self, type_: Any, value: Any) -> Any:
        """Resolve *value* to its concrete type, looking up a returned name."""
        if isinstance(type_, str):
            type_ = self.lookup(type_)
        concrete = resolve_abstract_type(type_, value)
        if isinstance(concrete, str):
            return self.lookup(concrete)
        return concrete

    def field(self, type_name: str, field_name: str) -> FieldDefinition | InputField | None:
        """Return field *field_name* of the type called *type_name*, or None."""
        return lookup_field(self.lookup(type_name), field_name)

    def is_valid_input(self, ref: Any, value: Any) -> bool:
        """Check *value* against *ref* after resolving names; unknown types reject."""
        resolved = self.resolve(ref)
        if resolved is None:
            return False
        return is_valid_input(resolved, value)


def check_types(types: Iterable[NamedType], *, include_builtins: bool = True) -> list[SchemaIssue]:
    """Check a set of named type definitions for structural problems.

    Args:
        types: Named type descriptors. Types reachable from them through
            fields, arguments, wrappers and union members are included too.
        include_builtins: Add the built-in scalars for names not defined by
            *types*.

    Returns:
        A list of :class:`SchemaIssue` instances. An empty list means the
        types form a valid schema.
    """
    checker = _SchemaChecker(types, include_builtins)
    return checker.check()


def assemble(types: Iterable[NamedType], *, include_builtins: bool = True) -> Schema:
    """Assemble named type definitions into a :class:`Schema`.

    Raises:
        SchemaAssemblyError: If :func:`check_types` reports any issue.
    """
    checker = _SchemaChecker(types, include_builtins)
    issues = checker.check()
    if issues:
        raise SchemaAssemblyError(issues)
    logger.debug("Assembled schema with %d named types", len(checker.named))
    return Schema(types=dict(checker.named))


def display(ref: Any) -> str:
    """Render a type reference in GraphQL notation, e.g. ``[String!]``."""
    if isinstance(ref, str):
        return ref
    kind = kind_of(ref)
    if kind is TypeKind.LIST:
        return f"[{display(ref.of_type)}]"
    if kind is TypeKind.NON_NULL:
        return f"{display(ref.of_type)}!"
    if kind in NAMED_KINDS:
        return ref.name
    return repr(ref)


# ################
# Implementation
# ################


def _resolve_ref(ref: Any, types: dict[str, NamedType]) -> Any:
    if isinstance(ref, str):
        return types.get(ref)
    kind = kind_of(ref)
    if kind in WRAPPING_KINDS:
        inner = _resolve_ref(ref.of_type, types)
        if inner is None:
            return None
        if inner is ref.of_type:
            return ref
        return ref.model_copy(update={"of_type": inner})
    if kind in NAMED_KINDS:
        return ref
    return None


def _innermost_name(ref: TypeRef) -> str | None:
    """Return the type name at the bottom of *ref*, if it is a bare name."""
    while kind_of(ref) in WRAPPING_KINDS:
        ref = ref.of_type
    return ref if isinstance(ref, str) else None


class _SchemaChecker:
    """Collects named types from a set of definitions and checks them."""

    def __init__(self, types: Iterable[NamedType], include_builtins: bool) -> None:
        self._roots = list(types)
        self._include_builtins = include_builtins
        self._issues: list[SchemaIssue] = []
        self.named: dict[str, NamedType] = {}

    def check(self) -> list[SchemaIssue]:
        """Collect all named types, then run every check; return the issues."""
        for root in self._roots:
            if kind_of(root) not in NAMED_KINDS:
                self._issue(f"Schema members must be named types, got {display(root)}")
                continue
            self._collect(root)

        if self._include_builtins:
            for name, scalar in BUILTIN_SCALARS.items():
                self.named.setdefault(name, scalar)

        for type_ in list(self.named.values()):
            kind = kind_of(type_)
            if kind in (TypeKind.OBJECT, TypeKind.INTERFACE):
                self._check_output_fields(type_)
            elif kind is TypeKind.INPUT_OBJECT:
                self._check_input_fields(type_)
            elif kind is TypeKind.UNION:
                self._check_union_members(type_)

        return self._issues

    def _issue(self, message: str) -> None:
        self._issues.append(SchemaIssue(message=message))

    # -------- collection --------

    def _collect(self, type_: NamedType) -> None:
        existing = self.named.get(type_.name)
        if existing is not None:
            if existing is not type_ and existing != type_:
                self._issue(f"Duplicate type name '{type_.name}'")
            return
        self.named[type_.name] = type_

        kind = kind_of(type_)
        if kind in (TypeKind.OBJECT, TypeKind.INTERFACE):
            for field_def in type_.fields.values():
                self._collect_ref(field_def.type)
                for arg in field_def.args.values():
                    self._collect_ref(arg.type)
        elif kind is TypeKind.INPUT_OBJECT:
            for input_field in type_.fields.values():
                self._collect_ref(input_field.type)
        elif kind is TypeKind.UNION:
            for member in type_.types:
                self._collect_ref(member)

    def _collect_ref(self, ref: TypeRef) -> None:
        while kind_of(ref) in WRAPPING_KINDS:
            ref = ref.of_type
        if kind_of(ref) in NAMED_KINDS:
            self._collect(ref)

    # -------- checks --------

    def _resolve_or_report(self, ref: TypeRef, location: str) -> Any:
        missing = _innermost_name(ref)
        if missing is not None and missing not in self.named:
            self._issue(f"{location} references unknown type '{missing}'")
            return None
        return _resolve_ref(ref, self.named)

    def _check_output_fields(self, type_: NamedType) -> None:
        for field_name, field_def in type_.fields.items():
            location = f"Field '{type_.name}.{field_name}'"
            resolved = self._resolve_or_report(field_def.type, location)
            if resolved is not None and not is_output_type(resolved):
                self._issue(f"{location} must have an output type, got '{display(field_def.type)}'")
            for arg_name, arg in field_def.args.items():
                arg_location = f"Argument '{type_.name}.{field_name}({arg_name})'"
                resolved_arg = self._resolve_or_report(arg.type, arg_location)
                if resolved_arg is not None and not is_input_type(resolved_arg):
                    self._issue(f"{arg_location} must have an input type, got '{display(arg.type)}'")

    def _check_input_fields(self, type_: NamedType) -> None:
        for field_name, input_field in type_.fields.items():
            location = f"Input field '{type_.name}.{field_name}'"
            resolved = self._resolve_or_report(input_field.type, location)
            if resolved is not None and not is_input_type(resolved):
                self._issue(f"{location} must have an input type, got '{display(input_field.type)}'")

    def _check_union_members(self, type_: NamedType) -> None:
        for member in type_.types:
            location = f"Union '{type_.name}'"
            resolved = self._resolve_or_report(member, location)
            if resolved is not None and not is_object_type(resolved):
                self._issue(f"{location} member '{display(member)}' is not an object type")
