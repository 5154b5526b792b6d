# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    BehaviorSpecError,
    BindError,
    CapabilityError,
    ConventionError,
    EntityError,
    ItemExistsError,
    ValidationError,
)
from .binder import bind
from .config import BindSettings, settings
from .convention import (
    NamingConvention,
    SnakeCaseConvention,
    default_convention,
    validate_behavior_name,
)
from .dispatch import TypeDispatchTable, configure
from .entity import DynamicEntity, Introspectable, ObjectEntity, as_entity
from .introspect import attribute_names, properties
from .invoke import try_invoke
from .relation import related_object
from .types import Undefined, Unset
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "BehaviorSpecError",
    "BindError",
    "BindSettings",
    "CapabilityError",
    "ConventionError",
    "DynamicEntity",
    "EntityError",
    "Introspectable",
    "ItemExistsError",
    "NamingConvention",
    "ObjectEntity",
    "SnakeCaseConvention",
    "TypeDispatchTable",
    "Undefined",
    "Unset",
    "ValidationError",
    "__version__",
    "as_entity",
    "attribute_names",
    "bind",
    "configure",
    "default_convention",
    "properties",
    "related_object",
    "settings",
    "try_invoke",
    "validate_behavior_name",
)
