# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._sentinel import (
    MaybeSentinel,
    MaybeUndefined,
    MaybeUnset,
    SingletonType,
    T,
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_sentinel,
    is_undefined,
    is_unset,
    not_sentinel,
)

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
