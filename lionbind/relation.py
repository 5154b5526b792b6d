# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .convention import NamingConvention, default_convention
from .entity import as_entity
from .types import MaybeUndefined, Undefined

__all__ = ("related_object",)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def related_object(
    holder: Any, type_: type[T], *, convention: NamingConvention | None = None
) -> MaybeUndefined[T]:
    """Find the ``type_`` instance a holder keeps by convention.

    With the default convention a holder of an ``Invoice`` is expected to
    keep it as ``invoice``, or failing that as ``object``. The type-derived
    name always wins over the fallback. A candidate holding a value of the
    wrong type counts as absent.

    Returns:
        The related object, or ``Undefined``.
    """
    target = as_entity(holder)
    convention = convention or default_convention()
    for name in convention.relation_names(type_):
        if not target.has_attribute(name):
            continue
        value = target.get_attribute(name)
        if isinstance(value, type_):
            return value
        logger.debug(
            "%r holds %s under %r, wanted %s",
            target,
            type(value).__name__,
            name,
            type_.__name__,
        )
    return Undefined
