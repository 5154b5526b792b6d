# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Per-argument-type configuration dispatch.

``configure`` derives the behavior name from the argument's exact runtime
type at call time. ``TypeDispatchTable`` does the same resolution once, at
registration time, and keys handlers by type object instead of by name.
Neither falls back to a supertype.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ._errors import ItemExistsError, ValidationError
from .convention import NamingConvention, default_convention
from .entity import Introspectable, accepts_one_argument, as_entity
from .types import MaybeUndefined, Undefined

__all__ = ("TypeDispatchTable", "configure")

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


def configure(
    entity: Any, argument: Any, *, convention: NamingConvention | None = None
) -> bool:
    """Let ``entity`` configure itself from ``argument`` if it knows how.

    Invokes ``prefix + type(argument).__name__`` on the entity when that
    behavior exists, discarding its result.

    Returns:
        True if a behavior was invoked.
    """
    target = as_entity(entity)
    convention = convention or default_convention()
    name = convention.behavior_name(type(argument))
    if not target.has_behavior(name):
        logger.debug("No %r on %r", name, target)
        return False
    target.invoke_behavior(name, argument)
    return True


def _bound(entity: Introspectable, name: str) -> Handler:
    def handler(argument: Any) -> Any:
        return entity.invoke_behavior(name, argument)

    handler.__name__ = name
    return handler


class TypeDispatchTable:
    """Handlers keyed by exact argument type.

    Usage:
        table = TypeDispatchTable()

        @table.register(Invoice)
        def on_invoice(invoice):
            ...

        table.dispatch(Invoice())   # True
        table.dispatch(Receipt())   # False, no-op
    """

    def __init__(self) -> None:
        self._handlers: dict[type, Handler] = {}

    def register(self, type_: type, handler: Handler | None = None):
        """Register a handler for ``type_``; returns a decorator if omitted."""
        if not isinstance(type_, type):
            raise ValidationError.from_value(type_, expected="type")

        def _register(fn: Handler) -> Handler:
            if not callable(fn) or not accepts_one_argument(fn):
                raise ValidationError.from_value(
                    fn, expected="callable taking one positional argument"
                )
            if type_ in self._handlers:
                raise ItemExistsError(f"Handler for {type_.__name__} already registered")
            self._handlers[type_] = fn
            return fn

        if handler is None:
            return _register
        return _register(handler)

    def handler_for(self, type_: type) -> MaybeUndefined[Handler]:
        return self._handlers.get(type_, Undefined)

    def dispatch(self, argument: Any) -> bool:
        handler = self._handlers.get(type(argument))
        if handler is None:
            logger.debug("No handler for %s", type(argument).__name__)
            return False
        handler(argument)
        return True

    def __contains__(self, type_: type) -> bool:
        return type_ in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    @classmethod
    def from_entity(
        cls,
        entity: Any,
        types: Iterable[type],
        convention: NamingConvention | None = None,
    ) -> TypeDispatchTable:
        """Probe ``entity`` once per type and register the behaviors it has."""
        target = as_entity(entity)
        convention = convention or default_convention()
        table = cls()
        for type_ in dict.fromkeys(types):
            name = convention.behavior_name(type_)
            if target.has_behavior(name):
                table.register(type_, _bound(target, name))
        return table
