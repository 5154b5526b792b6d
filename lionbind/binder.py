# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Capability-gated batch binding of attribute values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .entity import as_entity
from .types import is_sentinel

__all__ = ("Supplier", "bind")

logger = logging.getLogger(__name__)

Supplier = Callable[[], Any]


def bind(entity: Any, bindings: Mapping[str, Supplier]) -> int:
    """Assign values to whichever of ``bindings`` the entity can accept.

    Each supplier is called only after the entity confirms it has a mutator
    for the name, so suppliers for unsupported names never run. A supplier
    returning ``None`` (or a sentinel) clears the attribute instead of
    setting it.

    Bindings are independent; iteration order is unspecified.

    Args:
        entity: An ``Introspectable`` or any object to adapt.
        bindings: Attribute name to zero-argument value supplier.

    Returns:
        Number of attributes that received a non-empty value. Clears and
        skipped names are not counted.
    """
    target = as_entity(entity)
    count = 0
    for name, supplier in bindings.items():
        if not target.has_mutator(name):
            logger.debug("Skipping %r: no mutator on %r", name, target)
            continue
        value = supplier()
        if is_sentinel(value, {"none"}):
            target.clear_attribute(name)
            continue
        target.set_attribute(name, value)
        count += 1
    return count
