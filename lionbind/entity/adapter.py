# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Reflection adapter that exposes any Python object as an entity."""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from .._errors import CapabilityError, EntityError
from ..types import Undefined
from .protocol import Introspectable

__all__ = (
    "ObjectEntity",
    "accepts_one_argument",
    "as_entity",
)

# members that bind to a method without running user code
_METHOD_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodDescriptorType,
    types.WrapperDescriptorType,
    types.ClassMethodDescriptorType,
    staticmethod,
    classmethod,
)


def _is_public(name: Any) -> bool:
    return isinstance(name, str) and name.isidentifier() and not name.startswith("_")


def _slots_of(klass: type) -> tuple[str, ...]:
    slots = vars(klass).get("__slots__", ())
    return (slots,) if isinstance(slots, str) else tuple(slots)


def _is_dataclass_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def accepts_one_argument(fn: Callable) -> bool:
    """Check that ``fn`` can be called with exactly one positional argument.

    Callables without an inspectable signature (some builtins) are assumed
    to accept one.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


class ObjectEntity:
    """Probe and act on a plain object through Python reflection.

    Private names (leading underscore) are invisible. The adapter never
    creates a name the object does not already declare: a mutator is a
    settable property or data descriptor, a declared pydantic or dataclass
    field, or an attribute the instance or its class already holds.

    Probes resolve members with ``inspect.getattr_static`` and never run a
    property getter or ``__getattr__`` hook. Only ``get_attribute`` and
    ``invoke_behavior`` execute code on the target.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Any):
        if target is None:
            raise EntityError("Cannot adapt None into an entity")
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def _member(self, name: str) -> Any:
        return inspect.getattr_static(self._target, name, Undefined)

    def _behavior(self, name: str) -> Any:
        """Resolve ``name`` to a callable, or ``Undefined``."""
        if not _is_public(name):
            return Undefined
        member = self._member(name)
        if isinstance(member, _METHOD_TYPES):
            fn = getattr(self._target, name)
        elif inspect.isclass(member) or hasattr(type(member), "__get__"):
            # properties, cached properties and other descriptors
            return Undefined
        elif callable(member):
            fn = member
        else:
            return Undefined
        return fn if accepts_one_argument(fn) else Undefined

    def has_mutator(self, name: str) -> bool:
        if not _is_public(name):
            return False
        target = self._target
        cls = type(target)

        member = inspect.getattr_static(cls, name, Undefined)
        if isinstance(member, property):
            return member.fset is not None

        if isinstance(target, BaseModel):
            # only declared fields; model_config and friends are not state
            if name not in cls.model_fields:
                return False
            return not cls.model_config.get("frozen", False)
        if _is_dataclass_instance(target) and name in {
            f.name for f in dataclasses.fields(target)
        }:
            return not cls.__dataclass_params__.frozen

        if member is not Undefined:
            if hasattr(type(member), "__set__"):
                return True
            if callable(member) or isinstance(member, (staticmethod, classmethod)):
                return False

        instance_dict = getattr(target, "__dict__", None)
        if instance_dict is None:
            return False
        return name in instance_dict or member is not Undefined

    def set_attribute(self, name: str, value: Any) -> None:
        if not self.has_mutator(name):
            raise CapabilityError(
                f"{type(self._target).__name__} has no mutator {name!r}",
                details={"name": name},
            )
        setattr(self._target, name, value)

    def clear_attribute(self, name: str) -> None:
        self.set_attribute(name, None)

    def has_attribute(self, name: str) -> bool:
        if not _is_public(name):
            return False
        member = self._member(name)
        if member is Undefined or isinstance(member, _METHOD_TYPES):
            return False
        if isinstance(member, property):
            return member.fget is not None
        if isinstance(member, types.MemberDescriptorType) and not isinstance(
            self._target, type
        ):
            # an unassigned slot raises on read
            try:
                member.__get__(self._target, type(self._target))
            except AttributeError:
                return False
        return True

    def get_attribute(self, name: str) -> Any:
        """Read ``name``; errors raised by a getter propagate."""
        if not self.has_attribute(name):
            return Undefined
        return getattr(self._target, name, Undefined)

    def has_behavior(self, name: str) -> bool:
        return self._behavior(name) is not Undefined

    def invoke_behavior(self, name: str, argument: Any) -> Any:
        fn = self._behavior(name)
        if fn is Undefined:
            raise CapabilityError(
                f"{type(self._target).__name__} has no behavior {name!r}",
                details={"name": name},
            )
        return fn(argument)

    def attribute_names(self) -> list[str]:
        target = self._target
        cls = type(target)
        names: list[str] = []

        if isinstance(target, BaseModel):
            names.extend(cls.model_fields)
        else:
            if _is_dataclass_instance(target):
                names.extend(f.name for f in dataclasses.fields(target))
            for klass in reversed(cls.__mro__[:-1]):
                names.extend(_slots_of(klass))
                names.extend(
                    k for k, v in vars(klass).items() if isinstance(v, property)
                )
            names.extend(getattr(target, "__dict__", ()))

        return [
            n for n in dict.fromkeys(names) if _is_public(n) and self.has_attribute(n)
        ]

    def __repr__(self) -> str:
        return f"ObjectEntity({self._target!r})"


def as_entity(obj: Any) -> Introspectable:
    """Return ``obj`` if it is already an entity, else wrap it.

    Raises:
        EntityError: If ``obj`` is None.
    """
    if obj is None:
        raise EntityError("Cannot adapt None into an entity")
    if isinstance(obj, Introspectable):
        return obj
    return ObjectEntity(obj)
