# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar


class BindError(Exception):
    default_message: ClassVar[str] = "lionbind error"
    status_code: ClassVar[int] = 500

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause
        self.message = message or self.default_message
        self.details = details or {}
        self.status_code = status_code or self.status_code

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Build an error describing an offending value."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class ValidationError(BindError):
    """A caller broke the contract of an operation."""

    default_message = "Validation failed"
    status_code = 422


class BehaviorSpecError(ValidationError):
    """A behavior name is not a single-argument behavior spec."""

    default_message = "Malformed behavior spec"


class ConventionError(ValidationError):
    """A type name cannot be turned into a convention name."""

    default_message = "Type name unusable by naming convention"


class EntityError(BindError):
    """The target cannot be adapted into an introspectable entity."""

    default_message = "Not an introspectable entity"
    status_code = 400


class CapabilityError(BindError):
    """An act was attempted on a capability the entity does not have."""

    default_message = "Capability not supported"
    status_code = 404


class ItemExistsError(BindError):
    default_message = "Item already exists"
    status_code = 409


__all__ = (
    "BehaviorSpecError",
    "BindError",
    "CapabilityError",
    "ConventionError",
    "EntityError",
    "ItemExistsError",
    "ValidationError",
)
