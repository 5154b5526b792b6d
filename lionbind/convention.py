# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Naming conventions that turn type names into member names.

A convention owns two derivations:

- the *behavior name* a target implements to accept configuration from an
  argument of a given type (``prefix + TypeName``), and
- the *relation names* a holder may keep a related object under
  (``typeName`` first, then a generic fallback such as ``object``).

Only the bare ``__name__`` of a type is used. Names carrying a namespace or
anything else that is not a Python identifier are rejected rather than
normalized, so two conventions never silently disagree about a type.
"""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass
from typing import Any

from ._errors import BehaviorSpecError, ConventionError
from .config import settings

__all__ = (
    "NamingConvention",
    "SnakeCaseConvention",
    "default_convention",
    "validate_behavior_name",
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@dataclass(slots=True, frozen=True)
class NamingConvention:
    """Lower-first convention: ``InvoiceLine`` is held as ``invoiceLine``."""

    prefix: str = "configure_for_"
    fallback: str = "object"

    def type_name(self, type_: type) -> str:
        name = getattr(type_, "__name__", None)
        if not isinstance(name, str) or not name.isidentifier():
            raise ConventionError.from_value(
                name,
                expected="bare identifier type name",
                message=f"Cannot derive a convention name from {type_!r}",
            )
        return name

    def behavior_name(self, type_: type) -> str:
        return self.prefix + self.type_name(type_)

    def attribute_name(self, type_: type) -> str:
        name = self.type_name(type_)
        return name[:1].lower() + name[1:]

    def relation_names(self, type_: type) -> tuple[str, ...]:
        """Candidate attribute names, most specific first."""
        names = (self.attribute_name(type_), self.fallback)
        return tuple(dict.fromkeys(names))


@dataclass(slots=True, frozen=True)
class SnakeCaseConvention(NamingConvention):
    """Snake-case convention: ``InvoiceLine`` is held as ``invoice_line``."""

    def attribute_name(self, type_: type) -> str:
        name = self.type_name(type_)
        return _CAMEL_BOUNDARY.sub("_", name).lower()


def default_convention() -> NamingConvention:
    """Build the convention selected by settings."""
    cls = (
        SnakeCaseConvention
        if settings.NAMING_STYLE == "snake_case"
        else NamingConvention
    )
    return cls(prefix=settings.DISPATCH_PREFIX, fallback=settings.RELATION_FALLBACK)


def validate_behavior_name(spec: Any) -> str:
    """Return ``spec`` if it names a single-argument behavior.

    A behavior spec is a plain identifier; the one argument slot is implied
    by the call shape. Anything else is a programming error on the caller's
    side.

    Raises:
        BehaviorSpecError: If ``spec`` is not a usable identifier.
    """
    if not isinstance(spec, str):
        raise BehaviorSpecError.from_value(spec, expected="str")
    if not spec.isidentifier() or keyword.iskeyword(spec):
        raise BehaviorSpecError.from_value(
            spec,
            expected="identifier",
            message=f"Behavior spec {spec!r} is not a single-argument behavior name",
        )
    return spec
