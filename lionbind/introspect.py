# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from .entity import as_entity
from .types import not_sentinel

__all__ = ("attribute_names", "properties")


def attribute_names(entity: Any) -> list[str]:
    """Public attribute names of ``entity``, in declaration order."""
    return as_entity(entity).attribute_names()


def properties(entity: Any) -> dict[str, Any]:
    """Snapshot of every attribute that currently holds a value.

    Cleared (``None``) and never-assigned attributes are left out.
    """
    target = as_entity(entity)
    snapshot = {}
    for name in target.attribute_names():
        value = target.get_attribute(name)
        if not_sentinel(value, {"none"}):
            snapshot[name] = value
    return snapshot
