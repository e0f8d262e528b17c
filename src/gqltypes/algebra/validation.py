# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validity of raw input values against a (possibly wrapped) type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from gqltypes.model.kinds import LEAF_KINDS, TypeKind, kind_of

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def is_valid_input(type_: Any, value: Any) -> bool:
    """Return True if *value* is acceptable input for *type_*.

    Rules, in order:

    1. A non-null type rejects ``None`` and otherwise defers to its inner type.
    2. Any other type accepts ``None``.
    3. A list type checks each element of a list or tuple against its inner
       type; any other value is checked as a single element.
    4. A scalar with a parse capability, or an enum, accepts the value unless
       parsing raises ``ValueError``, ``TypeError`` or ``ArithmeticError``.
    5. Everything else is accepted. Field-level checks of input objects belong
       to the caller.

    Never raises for a failing parse capability or an unrecognized type.
    """
    kind = kind_of(type_)
    if kind is TypeKind.NON_NULL:
        if value is None:
            return False
        return is_valid_input(type_.of_type, value)

    if value is None:
        return True

    if kind is TypeKind.LIST:
        if isinstance(value, (list, tuple)):
            return all(is_valid_input(type_.of_type, item) for item in value)
        return is_valid_input(type_.of_type, value)

    parse = parse_capability(type_)
    if parse is None:
        return True
    try:
        parse(value)
    except (ValueError, TypeError, ArithmeticError) as exc:
        logger.debug("Value %r rejected by type '%s': %s", value, type_.name, exc)
        return False
    return True


def parse_capability(type_: Any) -> Callable[[Any], Any] | None:
    """Return the parse capability of a leaf type, or None if it has none."""
    # ScalarType.parse is an optional field; EnumType.parse is a method.
    if kind_of(type_) in LEAF_KINDS:
        return type_.parse
    return None
