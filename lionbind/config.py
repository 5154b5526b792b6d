# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import keyword
from typing import Any, ClassVar, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BindSettings(BaseSettings, frozen=True):
    """Defaults for convention-derived names, overridable from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="LIONBIND_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DISPATCH_PREFIX: str = "configure_for_"
    RELATION_FALLBACK: str = "object"
    NAMING_STYLE: Literal["lower_first", "snake_case"] = "lower_first"
    LOG_LEVEL: str = "INFO"

    _instance: ClassVar[Any] = None

    @field_validator("DISPATCH_PREFIX")
    @classmethod
    def _check_prefix(cls, v: str) -> str:
        # prefix + any identifier must stay an identifier
        if v and not (v + "X").isidentifier():
            raise ValueError(f"Dispatch prefix {v!r} cannot start a name")
        return v

    @field_validator("RELATION_FALLBACK")
    @classmethod
    def _check_fallback(cls, v: str) -> str:
        if not v.isidentifier() or keyword.iskeyword(v):
            raise ValueError(f"Relation fallback {v!r} is not an identifier")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {v!r}")
        return v


settings = BindSettings()
BindSettings._instance = settings
