# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ("Introspectable",)


@runtime_checkable
class Introspectable(Protocol):
    """An object whose members can be probed by name before use.

    Attribute names and behavior names live in separate namespaces. Every
    act (``set_attribute``, ``clear_attribute``, ``invoke_behavior``) is only
    defined once the matching probe has answered True.
    """

    def has_mutator(self, name: str) -> bool: ...

    def set_attribute(self, name: str, value: Any) -> None: ...

    def clear_attribute(self, name: str) -> None:
        """Assign the explicit no-value state (``None``)."""
        ...

    def has_attribute(self, name: str) -> bool:
        """Report whether ``name`` holds a value, without reading it."""
        ...

    def get_attribute(self, name: str) -> Any:
        """Return the value, or ``Undefined`` when the name is absent."""
        ...

    def has_behavior(self, name: str) -> bool: ...

    def invoke_behavior(self, name: str, argument: Any) -> Any: ...

    def attribute_names(self) -> list[str]: ...
