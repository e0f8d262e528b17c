# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors for the gqltypes schema model.

Every schema type is one of eight immutable variants. Six of them are named
(scalar, object, interface, union, enum, input object) and two are unnamed
wrappers (list and non-null) around exactly one inner type reference. A type
reference is either a descriptor or the name of a named type; names are
resolved by :class:`gqltypes.schema.Schema`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ParseError(ValueError):
    """Raised by a parse capability when a raw value cannot be coerced."""


class _Descriptor(BaseModel):
    """Common configuration shared by all type descriptors and their fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class Argument(_Descriptor):
    """An argument accepted by an object or interface field."""

    type: TypeRef
    description: str | None = None
    default_value: Any = None


class FieldDefinition(_Descriptor):
    """A field of an object or interface type."""

    type: TypeRef
    description: str | None = None
    args: dict[str, Argument] = _Field(default_factory=dict)
    resolve: Callable[..., Any] | None = None


class InputField(_Descriptor):
    """A field of an input object type; its type is only used in input position."""

    type: TypeRef
    description: str | None = None
    default_value: Any = None


class ScalarType(_Descriptor):
    """A leaf type whose values are coerced by its parse capability.

    Attributes:
        parse: Converts a raw input value into its internal form. Signals an
            invalid value by raising :class:`ParseError`, ``ValueError``,
            ``TypeError`` or ``ArithmeticError``. A scalar without a parse
            capability accepts any value.
        serialize: Converts an internal value into its external form.
    """

    kind: Literal["scalar"] = "scalar"
    name: str = _Field(min_length=1)
    description: str | None = None
    parse: Callable[[Any], Any] | None = None
    serialize: Callable[[Any], Any] | None = None


class ObjectType(_Descriptor):
    """A concrete composite type with a set of named fields."""

    kind: Literal["object"] = "object"
    name: str = _Field(min_length=1)
    description: str | None = None
    fields: dict[str, FieldDefinition] = _Field(default_factory=dict)


class InterfaceType(_Descriptor):
    """An abstract type declaring fields shared by its implementing objects."""

    kind: Literal["interface"] = "interface"
    name: str = _Field(min_length=1)
    description: str | None = None
    fields: dict[str, FieldDefinition] = _Field(default_factory=dict)
    resolve_type: Callable[[Any], TypeRef] | None = None


class UnionType(_Descriptor):
    """An abstract type whose values are one of several object types."""

    kind: Literal["union"] = "union"
    name: str = _Field(min_length=1)
    description: str | None = None
    types: tuple[ObjectType | str, ...] = ()
    resolve_type: Callable[[Any], TypeRef] | None = None


class EnumType(_Descriptor):
    """A leaf type restricted to a fixed set of member names.

    ``values`` maps each member name to its internal value. Parsing and
    serialization are derived from membership.
    """

    kind: Literal["enum"] = "enum"
    name: str = _Field(min_length=1)
    description: str | None = None
    values: dict[str, Any] = _Field(default_factory=dict)

    def parse(self, value: Any) -> Any:
        """Return the internal value for the member named *value*."""
        if isinstance(value, str) and value in self.values:
            return self.values[value]
        raise ParseError(f"Enum '{self.name}' has no member {value!r}")

    def serialize(self, value: Any) -> str:
        """Return the member name whose internal value equals *value*."""
        for member, internal in self.values.items():
            if internal == value:
                return member
        raise ParseError(f"Enum '{self.name}' cannot represent {value!r}")


class InputObjectType(_Descriptor):
    """A named collection of input fields, usable as an argument value."""

    kind: Literal["input_object"] = "input_object"
    name: str = _Field(min_length=1)
    description: str | None = None
    fields: dict[str, InputField] = _Field(default_factory=dict)


class ListType(_Descriptor):
    """Wrapper marking a sequence of values of the inner type."""

    kind: Literal["list"] = "list"
    of_type: TypeRef


class NonNullType(_Descriptor):
    """Wrapper forbidding null for the inner type.

    A non-null type may not wrap another non-null type.
    """

    kind: Literal["non_null"] = "non_null"
    of_type: TypeRef

    @field_validator("of_type")
    @classmethod
    def _reject_nested_non_null(cls, value: TypeRef) -> TypeRef:
        if isinstance(value, NonNullType):
            raise ValueError("Cannot wrap a NonNullType in another NonNullType")
        return value


NamedType = ScalarType | ObjectType | InterfaceType | UnionType | EnumType | InputObjectType
WrappingType = ListType | NonNullType

# A type descriptor; the `kind` discriminator selects the variant when
# validating plain mappings (e.g. loaded from YAML).
TypeDescriptor = Annotated[
    ScalarType | ObjectType | InterfaceType | UnionType | EnumType | InputObjectType | ListType | NonNullType,
    _Field(discriminator="kind"),
]

NamedTypeDescriptor = Annotated[NamedType, _Field(discriminator="kind")]

# A descriptor, or the name of a named type defined elsewhere in the schema.
TypeRef = Union[TypeDescriptor, str]


# Resolve forward references for models that use TypeRef.
Argument.model_rebuild()
FieldDefinition.model_rebuild()
InputField.model_rebuild()
ObjectType.model_rebuild()
InterfaceType.model_rebuild()
UnionType.model_rebuild()
InputObjectType.model_rebuild()
ListType.model_rebuild()
NonNullType.model_rebuild()
