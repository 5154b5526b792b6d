"""Tests for naming conventions and behavior-name validation."""

import pytest

import lionbind.convention as convention_mod
from lionbind import (
    BehaviorSpecError,
    BindSettings,
    ConventionError,
    NamingConvention,
    SnakeCaseConvention,
    default_convention,
    validate_behavior_name,
)


class InvoiceLine:
    pass


class HTTPRequest:
    pass


class TestNamingConvention:
    def test_behavior_name_is_prefix_plus_type_name(self):
        assert NamingConvention().behavior_name(InvoiceLine) == (
            "configure_for_InvoiceLine"
        )

    def test_custom_prefix(self):
        assert NamingConvention(prefix="on_").behavior_name(int) == "on_int"

    def test_attribute_name_lowers_first_letter_only(self):
        assert NamingConvention().attribute_name(InvoiceLine) == "invoiceLine"
        assert NamingConvention().attribute_name(HTTPRequest) == "hTTPRequest"

    def test_relation_names_order(self):
        """Type-derived name comes before the fallback."""
        assert NamingConvention().relation_names(InvoiceLine) == (
            "invoiceLine",
            "object",
        )

    def test_relation_names_deduplicated(self):
        """A type whose derived name equals the fallback yields one candidate."""
        assert NamingConvention().relation_names(object) == ("object",)

    def test_module_is_never_part_of_the_name(self):
        assert NamingConvention().type_name(InvoiceLine) == "InvoiceLine"

    def test_unusable_type_name_rejected(self):
        weird = type("not.valid", (), {})
        with pytest.raises(ConventionError):
            NamingConvention().behavior_name(weird)

    def test_non_type_rejected(self):
        with pytest.raises(ConventionError):
            NamingConvention().attribute_name(object())

    def test_frozen(self):
        with pytest.raises(Exception):
            NamingConvention().prefix = "x"


class TestSnakeCaseConvention:
    def test_attribute_name(self):
        assert SnakeCaseConvention().attribute_name(InvoiceLine) == "invoice_line"

    def test_acronyms(self):
        assert SnakeCaseConvention().attribute_name(HTTPRequest) == "http_request"

    def test_behavior_name_unchanged(self):
        assert SnakeCaseConvention().behavior_name(InvoiceLine) == (
            "configure_for_InvoiceLine"
        )


class TestDefaultConvention:
    def test_follows_settings(self):
        conv = default_convention()
        assert type(conv) is NamingConvention
        assert conv.prefix == "configure_for_"
        assert conv.fallback == "object"

    def test_snake_case_setting(self, monkeypatch):
        monkeypatch.setattr(
            convention_mod,
            "settings",
            BindSettings(NAMING_STYLE="snake_case", DISPATCH_PREFIX="on_", _env_file=None),
        )
        conv = default_convention()
        assert isinstance(conv, SnakeCaseConvention)
        assert conv.prefix == "on_"


class TestValidateBehaviorName:
    @pytest.mark.parametrize("spec", ["greet", "configure_for_Invoice", "_private"])
    def test_accepts_identifiers(self, spec):
        assert validate_behavior_name(spec) == spec

    @pytest.mark.parametrize(
        "spec", ["", "two words", "set:value:", "a.b", "1st", "class", None, 3]
    )
    def test_rejects_malformed(self, spec):
        with pytest.raises(BehaviorSpecError):
            validate_behavior_name(spec)
