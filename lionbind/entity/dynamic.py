# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import keyword
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .._errors import CapabilityError, ItemExistsError, ValidationError
from ..types import Undefined
from .adapter import accepts_one_argument

__all__ = ("DynamicEntity",)

Behavior = Callable[[Any], Any]


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise ValidationError.from_value(name, expected="identifier")
    return name


class DynamicEntity:
    """An entity whose members are declared at runtime.

    Attributes must be declared before they can be assigned; a declared but
    never assigned attribute is absent (it reads as ``Undefined`` and is not
    listed), a cleared one reads as ``None``. Behaviors are single-argument callables registered by name.

    Example:
        >>> e = DynamicEntity(attributes=["name"])
        >>> @e.register_behavior("greet")
        ... def greet(other):
        ...     return f"hello {other}"
        >>> e.has_mutator("name"), e.has_mutator("age")
        (True, False)
    """

    def __init__(
        self,
        attributes: Iterable[str] = (),
        behaviors: Mapping[str, Behavior] | None = None,
        *,
        readonly: Iterable[str] = (),
    ):
        self._values: dict[str, Any] = {}
        self._readonly: set[str] = set()
        self._behaviors: dict[str, Behavior] = {}

        for name in attributes:
            self.declare(name)
        for name in readonly:
            self.declare(name, readonly=True)
        for name, fn in (behaviors or {}).items():
            self.register_behavior(name, fn)

    def declare(
        self, name: str, value: Any = Undefined, *, readonly: bool = False
    ) -> None:
        """Declare an attribute, optionally with an initial value."""
        name = _check_name(name)
        if name in self._values:
            raise ItemExistsError(f"Attribute {name!r} already declared")
        self._values[name] = value
        if readonly:
            self._readonly.add(name)

    def register_behavior(self, name: str, fn: Behavior | None = None):
        """Register ``fn`` under ``name``; returns a decorator if ``fn`` is omitted."""
        name = _check_name(name)

        def _register(fn_: Behavior) -> Behavior:
            if not callable(fn_) or not accepts_one_argument(fn_):
                raise ValidationError.from_value(
                    fn_,
                    expected="callable taking one positional argument",
                    message=f"Behavior {name!r} must take exactly one argument",
                )
            if name in self._behaviors:
                raise ItemExistsError(f"Behavior {name!r} already registered")
            self._behaviors[name] = fn_
            return fn_

        if fn is None:
            return _register
        return _register(fn)

    def unregister_behavior(self, name: str) -> bool:
        """Remove a behavior; returns whether one was registered."""
        return self._behaviors.pop(name, None) is not None

    def has_mutator(self, name: str) -> bool:
        return name in self._values and name not in self._readonly

    def set_attribute(self, name: str, value: Any) -> None:
        if not self.has_mutator(name):
            raise CapabilityError(f"No mutator {name!r}", details={"name": name})
        self._values[name] = value

    def clear_attribute(self, name: str) -> None:
        self.set_attribute(name, None)

    def has_attribute(self, name: str) -> bool:
        return self._values.get(name, Undefined) is not Undefined

    def get_attribute(self, name: str) -> Any:
        return self._values.get(name, Undefined)

    def has_behavior(self, name: str) -> bool:
        return name in self._behaviors

    def invoke_behavior(self, name: str, argument: Any) -> Any:
        if name not in self._behaviors:
            raise CapabilityError(f"No behavior {name!r}", details={"name": name})
        return self._behaviors[name](argument)

    def attribute_names(self) -> list[str]:
        return [n for n, v in self._values.items() if v is not Undefined]

    def __repr__(self) -> str:
        return (
            f"DynamicEntity(attributes={list(self._values)}, "
            f"behaviors={list(self._behaviors)})"
        )
