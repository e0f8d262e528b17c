# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exhaustive tests for the classification predicates."""

from collections.abc import Callable
from typing import Any

import pytest

from gqltypes.algebra import (
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
    is_wrapped,
)
from gqltypes.model import (
    EnumType,
    FieldDefinition,
    InputField,
    InputObjectType,
    InterfaceType,
    ListType,
    NonNullType,
    ObjectType,
    ScalarType,
    UnionType,
)

# ###############
# Fixtures
# ###############

SCALAR = ScalarType(name="Date")
OBJECT = ObjectType(name="FieldTrip", fields={"id": FieldDefinition(type="ID")})
INTERFACE = InterfaceType(name="Named", fields={"name": FieldDefinition(type="String")})
UNION = UnionType(name="Search", types=(OBJECT,))
ENUM = EnumType(name="Color", values={"RED": 1})
INPUT_OBJECT = InputObjectType(name="TripFilter", fields={"city": InputField(type="String")})
LIST = ListType(of_type=SCALAR)
NON_NULL = NonNullType(of_type=SCALAR)

VARIANTS: dict[str, Any] = {
    "scalar": SCALAR,
    "object": OBJECT,
    "interface": INTERFACE,
    "union": UNION,
    "enum": ENUM,
    "input_object": INPUT_OBJECT,
    "list": LIST,
    "non_null": NON_NULL,
}

NAMED_VARIANTS = ["scalar", "object", "interface", "union", "enum", "input_object"]

# Variant names for which each tag-based predicate is true.
TAG_PREDICATES: dict[Callable[[Any], bool], set[str]] = {
    is_composite_type: {"object", "interface", "union"},
    is_abstract_type: {"interface", "union"},
    is_nullable_type: {"scalar", "object", "interface", "union", "enum", "input_object", "list"},
    is_named: {"scalar", "object", "interface", "union", "enum", "input_object"},
    is_wrapped: {"list", "non_null"},
    is_non_null: {"non_null"},
    is_object_type: {"object"},
    has_fields: {"object", "interface", "input_object"},
}

# Named variants for which each wrapper-transparent predicate is true.
UNWRAPPING_PREDICATES: dict[Callable[[Any], bool], set[str]] = {
    is_input_type: {"scalar", "enum", "input_object"},
    is_output_type: {"scalar", "object", "interface", "union", "enum"},
    is_leaf_type: {"scalar", "enum"},
}

ALL_PREDICATES = list(TAG_PREDICATES) + list(UNWRAPPING_PREDICATES)


# ###############
# Partition
# ###############


@pytest.mark.parametrize("variant", list(VARIANTS))
@pytest.mark.parametrize("predicate", list(TAG_PREDICATES), ids=lambda p: p.__name__)
def test_tag_predicate_partition(predicate: Callable[[Any], bool], variant: str) -> None:
    """Tag-based predicates match the category table for all eight variants."""
    assert predicate(VARIANTS[variant]) is (variant in TAG_PREDICATES[predicate])


@pytest.mark.parametrize("variant", NAMED_VARIANTS)
@pytest.mark.parametrize("predicate", list(UNWRAPPING_PREDICATES), ids=lambda p: p.__name__)
def test_unwrapping_predicate_partition(predicate: Callable[[Any], bool], variant: str) -> None:
    """Input, output and leaf predicates match the category table for named variants."""
    assert predicate(VARIANTS[variant]) is (variant in UNWRAPPING_PREDICATES[predicate])


@pytest.mark.parametrize("variant", NAMED_VARIANTS)
@pytest.mark.parametrize("predicate", list(UNWRAPPING_PREDICATES), ids=lambda p: p.__name__)
def test_unwrapping_predicate_looks_through_wrappers(predicate: Callable[[Any], bool], variant: str) -> None:
    """Wrapped types classify like the named type they wrap."""
    named = VARIANTS[variant]
    wrapped = NonNullType(of_type=ListType(of_type=NonNullType(of_type=named)))
    assert predicate(wrapped) is predicate(named)


# ###############
# Defensive Defaults
# ###############


@pytest.mark.parametrize("term", [None, "String", 0, {"fields": None}, object()])
@pytest.mark.parametrize("predicate", ALL_PREDICATES, ids=lambda p: p.__name__)
def test_unrecognized_terms_are_false(predicate: Callable[[Any], bool], term: object) -> None:
    assert predicate(term) is False


@pytest.mark.parametrize("predicate", list(UNWRAPPING_PREDICATES), ids=lambda p: p.__name__)
def test_wrapper_around_unresolved_name_is_false(predicate: Callable[[Any], bool]) -> None:
    """A wrapper whose innermost reference is a bare name has no named type."""
    assert predicate(ListType(of_type="String")) is False


def test_has_fields_is_structural() -> None:
    """Any object exposing a field mapping counts, whatever its type."""

    class Fielded:
        fields = {"id": None}

    assert has_fields(Fielded())
    assert not has_fields(UNION)
    assert not has_fields(ENUM)


def test_is_named_checks_the_tag_not_the_name_attribute() -> None:
    class Named:
        name = "FieldTrip"

    assert not is_named(Named())
