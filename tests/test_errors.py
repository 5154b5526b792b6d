# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for lionbind error classes."""

import pytest

from lionbind._errors import (
    BehaviorSpecError,
    BindError,
    CapabilityError,
    ConventionError,
    EntityError,
    ItemExistsError,
    ValidationError,
)


class TestBindError:
    """Tests for base BindError class."""

    def test_default_initialization(self):
        error = BindError()
        assert str(error) == "lionbind error"
        assert error.message == "lionbind error"
        assert error.details == {}
        assert error.status_code == 500

    def test_custom_message_and_status(self):
        error = BindError("Custom", status_code=404)
        assert str(error) == "Custom"
        assert error.status_code == 404

    def test_with_cause(self):
        cause = ValueError("Original error")
        error = BindError("Wrapped", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict(self):
        error = BindError("Test error", details={"name": "age"})
        assert error.to_dict() == {
            "error": "BindError",
            "message": "Test error",
            "status_code": 500,
            "details": {"name": "age"},
        }

    def test_to_dict_with_cause(self):
        error = BindError("Error", cause=ValueError("Root cause"))
        assert "ValueError" in error.to_dict(include_cause=True)["cause"]
        assert "cause" not in error.to_dict()

    def test_from_value(self):
        error = BindError.from_value(42, expected="str", field="age")
        assert error.details == {
            "value": 42,
            "type": "int",
            "expected": "str",
            "field": "age",
        }


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls,status",
        [
            (ValidationError, 422),
            (BehaviorSpecError, 422),
            (ConventionError, 422),
            (EntityError, 400),
            (CapabilityError, 404),
            (ItemExistsError, 409),
        ],
    )
    def test_status_codes(self, cls, status):
        assert cls().status_code == status
        assert issubclass(cls, BindError)

    def test_contract_errors_are_validation_errors(self):
        assert issubclass(BehaviorSpecError, ValidationError)
        assert issubclass(ConventionError, ValidationError)

    def test_default_messages_differ(self):
        assert BehaviorSpecError().message == "Malformed behavior spec"
        assert CapabilityError().message == "Capability not supported"
