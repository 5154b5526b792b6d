# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from .convention import validate_behavior_name
from .entity import as_entity
from .types import MaybeUndefined, Undefined

__all__ = ("try_invoke",)

logger = logging.getLogger(__name__)


def try_invoke(entity: Any, behavior: str, argument: Any) -> MaybeUndefined[Any]:
    """Invoke a single-argument behavior only if the entity supports it.

    Returns:
        The behavior's result (possibly None), or ``Undefined`` when the
        entity has no such behavior.

    Raises:
        BehaviorSpecError: If ``behavior`` is not a valid behavior name.
    """
    name = validate_behavior_name(behavior)
    target = as_entity(entity)
    if not target.has_behavior(name):
        logger.debug("Unsupported behavior %r on %r", name, target)
        return Undefined
    return target.invoke_behavior(name, argument)
