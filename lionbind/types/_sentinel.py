# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = (
    "MaybeSentinel",
    "MaybeUndefined",
    "MaybeUnset",
    "SingletonType",
    "T",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "is_sentinel",
    "is_undefined",
    "is_unset",
    "not_sentinel",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that keeps one instance per sentinel class."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for falsy singleton markers.

    Identity survives copy and deepcopy, so ``x is Undefined`` stays valid
    after an entity snapshot is copied around.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UndefinedType(SingletonType):
    """Marks a name that does not exist at all.

    Returned when an attribute was never declared or never assigned, when a
    relation lookup finds nothing, and when a behavior is unsupported.

    Example:
        >>> entity.get_attribute("missing") is Undefined
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        return "Undefined"


class UnsetType(SingletonType):
    """Marks a name that exists but holds no value.

    Suppliers may return it instead of ``None`` to request an explicit
    clear of the attribute.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"

    def __reduce__(self):
        return "Unset"


Undefined: Final = UndefinedType()
"""A name entirely missing from an entity."""
Unset: Final = UnsetType()
"""A name present but without a value."""

MaybeUndefined = Union[T, UndefinedType]
MaybeUnset = Union[T, UnsetType]
MaybeSentinel = Union[T, UndefinedType, UnsetType]

_EMPTY = (tuple(), set(), frozenset(), dict(), list(), "")


def is_sentinel(value: Any, additions: frozenset[str] | set[str] = frozenset()) -> bool:
    """Check if a value is a sentinel.

    Args:
        value: Any value to check.
        additions: Extra categories to treat as sentinel:
            "none" - treat None as sentinel
            "empty" - treat empty containers and strings as sentinel
    """
    if isinstance(value, (UndefinedType, UnsetType)):
        return True
    if "none" in additions and value is None:
        return True
    if "empty" in additions and value in _EMPTY:
        return True
    return False


def is_undefined(value: Any) -> bool:
    return isinstance(value, UndefinedType)


def is_unset(value: Any) -> bool:
    return isinstance(value, UnsetType)


def not_sentinel(value: Any, additions: frozenset[str] | set[str] = frozenset()) -> bool:
    """Check if a value is NOT a sentinel. Useful for filtering."""
    return not is_sentinel(value, additions)
