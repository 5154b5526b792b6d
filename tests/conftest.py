# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest

from lionbind import DynamicEntity

from tests.utils.models import Fragile, Person


@pytest.fixture
def person():
    return Person()


@pytest.fixture
def fragile():
    Fragile.reads = 0
    return Fragile()


@pytest.fixture
def dynamic():
    """Entity supporting mutator ``name`` but not ``age``; ``kind`` is readonly."""
    entity = DynamicEntity(attributes=["name"])
    entity.declare("kind", "person", readonly=True)
    return entity


@pytest.fixture
def spy_entity():
    """Entity whose behaviors record every call they receive."""
    calls = []
    entity = DynamicEntity()

    @entity.register_behavior("configure_for_Invoice")
    def _on_invoice(invoice):
        calls.append(("configure_for_Invoice", invoice))

    @entity.register_behavior("echo")
    def _echo(value):
        calls.append(("echo", value))
        return value

    @entity.register_behavior("nothing")
    def _nothing(value):
        calls.append(("nothing", value))
        return None

    entity.calls = calls
    return entity
