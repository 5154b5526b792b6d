# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .adapter import ObjectEntity, accepts_one_argument, as_entity
from .dynamic import DynamicEntity
from .protocol import Introspectable

__all__ = (
    "DynamicEntity",
    "Introspectable",
    "ObjectEntity",
    "accepts_one_argument",
    "as_entity",
)
